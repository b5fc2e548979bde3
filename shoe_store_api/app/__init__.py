"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Schemas, services and the durable storage layer live in
their own subpackages; HTTP routes are defined in ``api/v1/endpoints``
and grouped by API version under ``api/<version>/``.
"""

from .main import app  # noqa: F401
