"""Qt widgets and dialogs for the wheel shell."""
