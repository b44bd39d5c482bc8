"""Feedback adapters for transient visual flashes.

- terminal: printed markers, cleared by a loop timer
- web: queued for the browser page, which runs the CSS pulse
"""
