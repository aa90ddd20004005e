# gemini_client.py
import re
import base64
import binascii
import logging
from typing import List, Optional, Tuple
from google import genai
from google.genai import types

from ...errors import ConfigurationError, ServiceError
from ....models.analysis import Source

logger = logging.getLogger(__name__)

DEFAULT_MIME = "image/jpeg"

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(;[^,;]*)*),(?P<data>.*)$", re.S)


def make_client(api_key: Optional[str]) -> genai.Client:
    """Validate the configured credential before first use."""
    if not api_key:
        raise ConfigurationError()
    return genai.Client(api_key=api_key)


def decode_data_url(data_url: str) -> Tuple[bytes, str]:
    """
    Split a data URL into raw bytes and its MIME type.
    A bare base64 payload (no 'data:' header) is accepted and treated as JPEG.
    """
    if not isinstance(data_url, str) or not data_url.strip():
        raise ServiceError("No image data to analyze.")
    text = data_url.strip()
    mime, payload, is_b64 = DEFAULT_MIME, text, True
    m = _DATA_URL_RE.match(text)
    if m:
        mime = m.group("mime") or DEFAULT_MIME
        payload = m.group("data")
        is_b64 = ";base64" in (m.group("params") or "").lower()
    if not is_b64:
        raise ServiceError("Image data must be base64 encoded.")
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ServiceError("Image data could not be decoded. Please upload the photo again.")
    if not data:
        raise ServiceError("No image data to analyze.")
    return data, mime


def encode_data_url(data: bytes, mime: str = DEFAULT_MIME) -> str:
    return f"data:{mime};base64," + base64.b64encode(data).decode("ascii")


def image_part_from_data_url(data_url: str) -> types.Part:
    data, mime = decode_data_url(data_url)
    return types.Part.from_bytes(data=data, mime_type=mime)


def extract_text_from_response(resp) -> str:
    """Concatenate the text parts of the first candidate, thought parts skipped; fall back to resp.text."""
    for cand in (getattr(resp, "candidates", None) or []):
        content = getattr(cand, "content", None)
        if not content:
            continue
        texts = [
            part.text for part in (getattr(content, "parts", None) or [])
            if isinstance(getattr(part, "text", None), str) and not getattr(part, "thought", False)
        ]
        joined = "".join(texts)
        if joined.strip():
            return joined
    top = getattr(resp, "text", None)
    return top if isinstance(top, str) else ""


def extract_grounding_sources(resp) -> List[Source]:
    """Collect {uri, title} citations from grounding metadata, de-duplicated by uri."""
    sources: List[Source] = []
    seen = set()
    for cand in (getattr(resp, "candidates", None) or []):
        meta = getattr(cand, "grounding_metadata", None)
        if not meta:
            continue
        for chunk in (getattr(meta, "grounding_chunks", None) or []):
            web = getattr(chunk, "web", None)
            uri = getattr(web, "uri", None) if web else None
            if not uri or uri in seen:
                continue
            seen.add(uri)
            title = getattr(web, "title", None) or uri
            sources.append(Source(uri=uri, title=title))
    return sources
