"""
Test Suite for the Transaction Importer

Test Structure:
- fixtures/: Shared test data and utilities
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI, configuration and multi-row import tests

Test Data:
All test data uses synthetic accounts, commodities and prices.
"""
