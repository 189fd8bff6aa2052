"""
The MODEL layer contains pure data structures: word lists, the wheel slots,
selection modes and history. It has NO knowledge of Qt.
"""
