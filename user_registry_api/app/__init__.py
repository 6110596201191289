"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, database, errors),
``schemas`` (request and response models), ``services`` (the user
store) and ``api`` (the HTTP routes).
"""

from .main import app, create_app  # noqa: F401
