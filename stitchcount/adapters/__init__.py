"""External adapters for the stitch counter.

This package contains all external dependencies (SQLite, the HTTP
server, the terminal) and provides implementations of the core port
interfaces.

Adapter Organization:

- store/: Adapters for persisting the counter record (SQLite, JSON file)
- input/: Translation of pointer, touch and keyboard events
- display/: Rendering the digits (terminal, browser)
- feedback/: Transient flashes (terminal, browser)
- web/: HTTP server and page for the browser surface
- cli/: Interactive terminal session
- clock.py: Monotonic system clock
"""
