"""
git-ignore test suite
=====================

Test Modules
------------
- test_models.py: Tests for the Settings model and enums
- test_config.py: Tests for mirror path providers
- test_repository.py: Tests for mirror cloning and template indexing
- test_generator.py: Tests for .gitignore composition
- test_completions.py: Tests for shell completion rendering
- test_register.py: Tests for git subcommand registration
- test_cli.py: Tests for the command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_generator.py

    # Run specific test class
    pytest tests/test_generator.py::TestComposeGitignore
"""
