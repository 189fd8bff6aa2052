"""
The CONTROLLER layer: timers, settle detection, the selection state machine
and the session that wires them together.
"""
