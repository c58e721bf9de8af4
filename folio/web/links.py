"""Outbound link builders (mail client, map embed). Opaque passthroughs otherwise."""
from __future__ import annotations

from urllib.parse import quote

MAP_EMBED_BASE = "https://maps.google.com/maps"

# characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(text: str) -> str:
    return quote(text or "", safe=_URI_COMPONENT_SAFE)


def mailto_url(email: str) -> str:
    return f"mailto:{email}"


def map_embed_url(location: str) -> str:
    return f"{MAP_EMBED_BASE}?q={encode_uri_component(location)}&t=&z=13&ie=UTF8&iwloc=&output=embed"

