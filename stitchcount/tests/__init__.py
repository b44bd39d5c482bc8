"""Test suite for the stitch counter.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Integration tests for adapter implementations
   - Real SQLite and JSON files in temporary directories
   - The HTTP server on a free local port

3. fakes/: Port implementations for testing
   - In-memory implementations of PersistencePort, DisplayPort, etc.
   - Used by core unit tests
"""
