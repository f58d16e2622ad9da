"""
Opaque pagination cursors for the leaderboard.

Wire format: base64url (no padding) of the UTF-8 JSON object {"offset": n}.
Clients store and replay these verbatim, so the format must not change.
"""

import base64
import json
import math
from typing import Optional


def encode_cursor(offset: int) -> str:
    payload = json.dumps({"offset": offset}, separators=(",", ":"))
    return base64.urlsafe_b64encode(payload.encode("utf-8")).decode("ascii").rstrip("=")


def decode_cursor(cursor: Optional[str]) -> int:
    """
    Decode a cursor back to its offset.

    Anything that is not a well-formed cursor with a non-negative numeric
    offset decodes to 0, so a corrupt cursor restarts from the first page
    instead of failing the request.
    """
    if not cursor:
        return 0

    try:
        padded = cursor + "=" * (-len(cursor) % 4)
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        payload = json.loads(raw.decode("utf-8"))
    except ValueError:
        # binascii.Error, UnicodeError y JSONDecodeError son ValueError
        return 0

    if not isinstance(payload, dict):
        return 0

    offset = payload.get("offset")
    if isinstance(offset, bool) or not isinstance(offset, (int, float)):
        return 0
    if not math.isfinite(offset) or offset < 0:
        return 0

    return int(offset)
