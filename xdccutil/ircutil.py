"""IRC line splitting and automatic CTCP replies."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

_CRLF = b"\r\n"

CTCP_VERSION_REPLY = "VERSION  mIRC v6.16"
_TIME_FORMAT = "%a %b %d %H:%M:%S %Z %Y"


def find_crlf(buf: bytes) -> int:
    """Return the offset just past the first CRLF in ``buf``, or 0 if there is none."""
    index = bytes(buf).find(_CRLF)
    return index + 2 if index >= 0 else 0


def split_lines(buf: bytes) -> Tuple[List[bytes], bytes]:
    """Split complete CRLF-terminated lines off ``buf``.

    Returns the lines without their terminators and the unterminated remainder.
    """
    data = bytes(buf)
    lines: List[bytes] = []
    while (end := find_crlf(data)) > 0:
        lines.append(data[:end - 2])
        data = data[end:]
    return lines, data


def ctcp_reply(
    request: str,
    username: Optional[str] = None,
    realname: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Optional[str]:
    """Return the automatic reply text for a CTCP request, or None if it has none."""
    if request.startswith("PING"):
        return request
    if request == "VERSION":
        return CTCP_VERSION_REPLY
    if request == "FINGER":
        return f"FINGER {username or 'nobody'} ({realname or 'noname'}) Idle 0 seconds"
    if request == "TIME":
        moment = now if now is not None else datetime.now().astimezone()
        return moment.strftime(_TIME_FORMAT)
    return None