"""
Top‑level package for the Shoe Store API.

This file makes ``shoe_store_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``shoe_store_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
