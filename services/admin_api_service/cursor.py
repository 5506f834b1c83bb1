"""Opaque pagination cursors: URL-safe base64 of a row's internal id."""

import base64
import binascii


def encode_cursor(internal_id) -> str:
    return base64.urlsafe_b64encode(str(internal_id).encode("utf-8")).decode("ascii")


def decode_cursor(token: str) -> str:
    """Inverse of ``encode_cursor``. Raises ``ValueError`` on a malformed token."""
    if not isinstance(token, str) or not token:
        raise ValueError("Cursor must be a non-empty string")
    try:
        raw = base64.b64decode(token.encode("ascii"), altchars=b"-_", validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeError) as exc:
        raise ValueError(f"Malformed cursor: {token!r}") from exc
