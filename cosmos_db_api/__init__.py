"""
Top-level package for the Cosmos DB API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
