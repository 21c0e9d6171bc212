"""
Security helpers for HTTP responses.

- cors: origin allow-list matching and CORS header generation
"""

from event_wrapper.security.cors import cors_headers, get_request_origin

__all__ = [
    "cors_headers",
    "get_request_origin",
]
