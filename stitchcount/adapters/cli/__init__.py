"""Command-line interface adapters.

Provides an interactive terminal session for the counter:
- keyboard-style commands (up, down, left, right, r)
- clicks on digits and their decrement controls
"""
