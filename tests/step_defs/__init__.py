"""Step definitions package for BDD tests.

This package contains modular step definitions organized by domain/functionality.
Every module except helpers.py is registered as a pytest plugin by the root
conftest.py so pytest-bdd can discover its steps.
"""
