"""
Pydantic schema definitions for API payloads.

Records are plain passthrough documents; the envelope in ``response``
wraps every payload returned by the API.
"""
