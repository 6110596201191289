"""
Top‑level package for the User Registry API.

All functionality lives in submodules under ``app``; import the
application as ``user_registry_api.app.main:app``.
"""

__all__ = []
