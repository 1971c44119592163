"""Cursor encoding and decoding for connection pagination.

Cursors are opaque strings that encode a position in a candidate
sequence. Clients receive them on every edge and pass them back
unchanged as ``after``/``before`` arguments.

The cursor format is:
1. JSON object with the position and the connection kind
2. Base64 URL-safe encoded for use in URLs

Example cursor payload:
    {"p": 12, "k": "connection"}

Encoded: eyJwIjoxMiwiayI6ImNvbm5lY3Rpb24ifQ==
"""

from __future__ import annotations

import base64
import json
import logging

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

CURSOR_KIND = "connection"


class CursorData(BaseModel):
    """Internal representation of cursor data.

    Attributes:
        position: Zero-based index of the edge in the candidate sequence
        kind: Cursor family marker, guards against foreign tokens
    """

    position: int = Field(ge=0, strict=True, description="Edge position in the candidate sequence")
    kind: str = Field(default=CURSOR_KIND, description="Cursor family marker")

    model_config = {"frozen": True}


class CursorCodec:
    """Encode and decode position cursors.

    Usage:
        cursor = CursorCodec.encode_index(12)
        CursorCodec.decode_index(cursor)  # 12
        CursorCodec.decode_index("garbage")  # None
    """

    @staticmethod
    def encode(data: CursorData) -> str:
        """Encode cursor data to an opaque string.

        Args:
            data: Cursor data with the edge position

        Returns:
            URL-safe base64 encoded string
        """
        payload = {"p": data.position, "k": data.kind}
        json_str = json.dumps(payload, separators=(",", ":"))
        return base64.urlsafe_b64encode(json_str.encode()).decode()

    @staticmethod
    def decode(cursor: str) -> CursorData:
        """Decode a cursor string to cursor data.

        Args:
            cursor: URL-safe base64 encoded cursor string

        Returns:
            CursorData with the edge position

        Raises:
            ValueError: If cursor is invalid or corrupted
        """
        try:
            json_str = base64.urlsafe_b64decode(cursor.encode()).decode()
            payload = json.loads(json_str)
            if not isinstance(payload, dict):
                raise ValueError("cursor payload is not an object")
            data = CursorData(position=payload.get("p"), kind=payload.get("k", ""))
        except Exception as e:
            raise ValueError(f"Invalid cursor: {e}") from e

        if data.kind != CURSOR_KIND:
            raise ValueError(f"Invalid cursor: unexpected kind {data.kind!r}")
        return data

    @staticmethod
    def encode_index(position: int) -> str:
        """Encode a bare position."""
        return CursorCodec.encode(CursorData(position=position))

    @staticmethod
    def decode_index(cursor: str) -> int | None:
        """Decode a cursor to its position, or None when it is not a valid cursor.

        Range checks against a concrete sequence are the caller's concern.
        """
        try:
            return CursorCodec.decode(cursor).position
        except ValueError as e:
            logger.debug("Rejected pagination cursor", extra={"cursor": cursor, "reason": str(e)})
            return None


__all__ = ["CURSOR_KIND", "CursorCodec", "CursorData"]
