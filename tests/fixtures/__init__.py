"""
Test Fixtures and Utilities

Shared synthetic book data for unit and integration tests.
"""
