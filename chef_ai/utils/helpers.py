import io
from typing import Optional, Tuple

from flask import current_app
from PIL import Image, UnidentifiedImageError

from ..services.shared.gemini.gemini_client import encode_data_url

# Pillow formats whose bytes Gemini accepts under another MIME type
MIME_OVERRIDES = {
    "MPO": "image/jpeg",  # multi-picture JPEG from phone cameras
}
# Formats Gemini does not accept inline; re-encoded as PNG
CONVERT_TO_PNG = {"GIF"}


def allowed_file(filename: str, allowed=None) -> bool:
    """Check if file extension is allowed"""
    allowed = allowed if allowed is not None else current_app.config['ALLOWED_EXTENSIONS']
    return "." in filename and filename.rsplit(".", 1)[1].lower() in allowed


def gather_image(request_files):
    """Single uploaded photo from the 'image' form field, or None"""
    f = request_files.get("image")
    return f if f and f.filename else None


def sniff_image(data: bytes) -> Tuple[str, str]:
    """
    Confirm the bytes decode as an image and return (format, mime).
    Raises ValueError('bad_image') otherwise.
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            fmt = img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise ValueError("bad_image") from e
    mime = MIME_OVERRIDES.get(fmt or "") or Image.MIME.get(fmt or "")
    if not mime or not mime.startswith("image/"):
        raise ValueError("bad_image")
    return fmt, mime


def to_png(data: bytes) -> bytes:
    """First frame of an image, re-encoded as PNG"""
    with Image.open(io.BytesIO(data)) as img:
        frame = img.convert("RGBA") if "transparency" in img.info else img.convert("RGB")
        buf = io.BytesIO()
        frame.save(buf, format="PNG")
    return buf.getvalue()


def bytes_to_data_url(data: bytes) -> str:
    fmt, mime = sniff_image(data)
    if fmt in CONVERT_TO_PNG:
        return encode_data_url(to_png(data), "image/png")
    return encode_data_url(data, mime)


def upload_to_data_url(file_storage, allowed: Optional[set] = None) -> str:
    """Read an uploaded photo into memory as a data URL (nothing is written to disk)"""
    if not allowed_file(file_storage.filename, allowed):
        raise ValueError(f"bad_extension:{file_storage.filename}")
    data = file_storage.read()
    if not data:
        raise ValueError("bad_image")
    return bytes_to_data_url(data)
