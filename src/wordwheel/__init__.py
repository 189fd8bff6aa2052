"""Covert word-selection wheel (FORCE / VRTX) built on PySide6."""
