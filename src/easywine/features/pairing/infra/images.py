from __future__ import annotations

import base64
import binascii
import re
from typing import Tuple

from easywine.shared.llm.gemini_client import ImagePart

_RE_DATA_URL = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?:;[^,]*)?,", re.IGNORECASE)


class InvalidImage(ValueError):
    pass


def split_data_url(value: str) -> Tuple[str, str]:
    """
    "data:image/png;base64,AAAA" -> ("image/png", "AAAA").
    Bare base64 comes back with an empty MIME type.
    """
    s = (value or "").strip()
    m = _RE_DATA_URL.match(s)
    if not m:
        return "", s
    return (m.group("mime") or "").lower(), s[m.end():]


def decode_image(value: str, *, default_mime: str = "image/jpeg") -> ImagePart:
    mime, payload = split_data_url(value)
    payload = "".join(payload.split())
    if not payload:
        raise InvalidImage("empty image payload")
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImage(f"image is not valid base64: {e}") from e
    return ImagePart(data=raw, mime_type=mime or default_mime)
