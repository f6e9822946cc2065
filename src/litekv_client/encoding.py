"""URL path segment encoding compatible with encodeURIComponent."""

from __future__ import annotations

import re
from urllib.parse import quote

from litekv_core.constants import URI_COMPONENT_SAFE

_ESCAPE_RUN = re.compile(r"(?:%[0-9A-Fa-f]{2})+")

# surrogateescape maps each undecodable byte 0xNN to U+DCNN
_SURROGATE_LOW = "\udc80"
_SURROGATE_HIGH = "\udcff"


def encode_component(text: str) -> str:
    """Percent-encode text for embedding as a single URL path segment.

    Everything outside ASCII alphanumerics and ``-_.!~*'()`` is encoded
    as UTF-8 ``%XX`` escapes, so ``/`` and spaces never split or break
    the path.
    """
    return quote(text, safe=URI_COMPONENT_SAFE)


def decode_component(text: str) -> str:
    """Percent-decode a response body as UTF-8.

    ``+`` is kept literal. Escapes that do not form valid UTF-8 are left
    exactly as they appear in the body.
    """
    return _ESCAPE_RUN.sub(_decode_run, text)


def build_path(operation: str, *segments: str) -> str:
    """Join an operation name and already-encoded segments into a path."""
    return "/".join((operation, *segments))


def _decode_run(match: re.Match[str]) -> str:
    escapes = match.group(0)
    raw = bytes.fromhex(escapes.replace("%", ""))
    pieces: list[str] = []
    offset = 0
    for char in raw.decode("utf-8", errors="surrogateescape"):
        if _SURROGATE_LOW <= char <= _SURROGATE_HIGH:
            pieces.append(escapes[offset * 3 : offset * 3 + 3])
            offset += 1
        else:
            pieces.append(char)
            offset += len(char.encode("utf-8"))
    return "".join(pieces)
