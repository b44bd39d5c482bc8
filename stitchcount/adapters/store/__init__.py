"""State store adapters for persisting the counter record.

Implementations support multiple backends:
- SQLite (key-value table, single file)
- JSON file (localStorage-style slots)
"""
