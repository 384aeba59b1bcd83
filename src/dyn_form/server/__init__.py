"""
HTTP server for dyn-form.

Serves the form schema and accepts, lists and exports submissions.
"""

from dyn_form.server.app import create_app, run_http_server

__all__ = [
    "create_app",
    "run_http_server",
]
