"""Image payloads: decoding uploads and encoding results for the wire."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

from cineframe.errors import CinematicError, ErrorCategory

# (magic prefix, mime); WEBP is checked separately (RIFF....WEBP)
_MAGIC: tuple[tuple[bytes, str], ...] = (
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
)


@dataclass(frozen=True)
class ImagePayload:
    data: bytes
    mime_type: str

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.to_base64()}"


def sniff_mime_type(data: bytes) -> str | None:
    for prefix, mime in _MAGIC:
        if data.startswith(prefix):
            return mime
    if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    return None


def _split_data_url(text: str) -> tuple[str | None, str]:
    """'data:image/png;base64,AAAA' -> ('image/png', 'AAAA')."""
    if not text.startswith("data:"):
        return None, text
    header, sep, payload = text.partition(",")
    if not sep:
        raise CinematicError(ErrorCategory.INVALID_IMAGE, detail="data URL has no payload")
    mime = header[len("data:"):].split(";", 1)[0].strip()
    return mime or None, payload


def decode_image_payload(image_data: str, mime_type: str | None = None) -> ImagePayload:
    """Accept a data URL or bare base64 and return the decoded image.

    An explicit ``mime_type`` wins over the data URL header, which wins over
    magic-byte sniffing.
    """
    text = (image_data or "").strip()
    if not text:
        raise CinematicError(ErrorCategory.INVALID_IMAGE, detail="no image data supplied")

    url_mime, payload = _split_data_url(text)

    try:
        data = base64.b64decode("".join(payload.split()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise CinematicError(ErrorCategory.INVALID_IMAGE, detail=f"invalid base64: {e}") from e
    if not data:
        raise CinematicError(ErrorCategory.INVALID_IMAGE, detail="image data decoded to zero bytes")

    mime = (mime_type or url_mime or sniff_mime_type(data) or "").lower()
    if not mime.startswith("image/"):
        raise CinematicError(
            ErrorCategory.INVALID_IMAGE,
            detail=f"unsupported or unknown mime type: {mime or 'unknown'}",
        )
    return ImagePayload(data=data, mime_type=mime)
