"""
App assembly entry point.

Re-exports the FastAPI `app` from `behaviorable.api.main`.
"""

from behaviorable.api.main import app  # noqa: F401
