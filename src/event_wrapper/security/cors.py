"""
CORS origin matching for HTTP responses.

The allow-list is a semicolon delimited string of origin patterns. A pattern may
contain a ``*`` wildcard that stands for one or more word characters, so
``https://*.example.com`` allows ``https://app.example.com`` but not
``https://example.com``. Only an exact match grants access; there is no
permissive fallback.
"""

import re
from typing import Any, Dict, List, Mapping, Optional, Pattern

ORIGIN_SEPARATOR = ';'
WILDCARD = '*'


def parse_allowed_origins(allowed_origins: Optional[str]) -> List[str]:
    """Split the allow-list into its non-blank patterns."""
    if not allowed_origins:
        return []
    return [pattern.strip() for pattern in allowed_origins.split(ORIGIN_SEPARATOR) if pattern.strip()]


def compile_origin_pattern(pattern: str) -> Pattern[str]:
    """Build the matching rule for a single allow-list entry."""
    return re.compile(re.escape(pattern).replace(re.escape(WILDCARD), r'\w+'))


def get_request_origin(event: Any) -> Optional[str]:
    """Read the declared ``Origin`` header of an API Gateway event."""
    if not isinstance(event, Mapping):
        return None
    headers = event.get('headers')
    if not isinstance(headers, Mapping):
        return None
    for name, value in headers.items():
        if isinstance(name, str) and name.lower() == 'origin':
            return value
    return None


def cors_headers(request_origin: Optional[str], allowed_origins: Optional[str]) -> Optional[Dict[str, str]]:
    """
    Build the CORS headers granting ``request_origin`` access.

    Args:
        request_origin: Origin declared by the caller
        allowed_origins: Semicolon delimited allow-list of origin patterns

    Returns:
        Headers allowing the exact origin with credentials, or None when the
        allow-list is empty or no pattern matches
    """
    if not request_origin:
        return None

    for pattern in parse_allowed_origins(allowed_origins):
        if compile_origin_pattern(pattern).fullmatch(request_origin):
            return {
                'Access-Control-Allow-Origin': request_origin,
                'Access-Control-Allow-Credentials': 'true',
            }
    return None
