"""Shared constants for the LiteKV client."""

from __future__ import annotations

DEFAULT_API_URL = "https://litekv-api.onrender.com"

# Remote operation names, used as the first URL path segment
OP_EXISTS = "exists"
OP_SET = "setVal"
OP_GET = "getVal"
OP_INC = "inc"
OP_DEC = "dec"

# Plain-text response bodies
TRUE_BODY = "true"
ABSENT_BODIES = frozenset({"", "null", "undefined"})

# Characters encodeURIComponent leaves untouched besides ASCII alphanumerics
URI_COMPONENT_SAFE = "-_.!~*'()"
