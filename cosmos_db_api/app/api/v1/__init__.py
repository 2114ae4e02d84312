"""
Version 1 of the API.

Breaking changes to paths or to the response envelope belong in a new
version subpackage (e.g. ``v2``).
"""
