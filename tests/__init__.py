"""
Test Suite for Dollars

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: Configuration and CLI tests
"""
