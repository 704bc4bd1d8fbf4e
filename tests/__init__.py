"""
gohatch test suite
==================

Test Modules
------------
- test_models.py: Tests for the Pydantic configuration models
- test_renderer.py: Tests for template rendering
- test_generator.py: Tests for project scaffolding
- test_cli.py: Tests for the command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_renderer.py

    # Run specific test class
    pytest tests/test_renderer.py::TestRender
"""
