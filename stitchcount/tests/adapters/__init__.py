"""Integration tests for adapter implementations.

These tests exercise adapters against real files, databases and sockets
to validate correct translation between core domain models and
external formats.
"""
