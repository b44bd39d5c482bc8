"""Display adapters for rendering the two digits.

- stdout: terminal panel for the interactive CLI
- web: last rendered values, returned to the browser page
"""
