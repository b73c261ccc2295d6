"""Test suite for the interop generator.

Test Structure:
- domain/: Descriptor models, signature encoding and C# renderers
- application/: Batch compilation and artifact writing
- infrastructure/: Metadata loading
- config/: Tests for configuration management
- utils/: Filename and file writing helpers
- test_main.py: Command line runs against temporary directories

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run end-to-end tests only
"""
