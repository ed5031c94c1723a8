"""Test suite for the sass-naming package.

This package contains unit and integration tests validating name
tokenization, rule evaluation, stylesheet scanning, settings
resolution, the command-line interface, and pytest integration.
"""
