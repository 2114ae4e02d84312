"""
Application package initializer.

The API is organised in layers: ``schemas`` (records and the response
envelope), ``services`` (calls into the Cosmos DB SDK), ``api``
(versioned HTTP routers) and ``core`` (configuration, logging, errors
and the shared client handle).
"""

from .main import app  # noqa: F401
