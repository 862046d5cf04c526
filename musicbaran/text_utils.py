"""Name normalization shared by the library scanner and the site scraper."""

import re
from typing import Optional
from urllib.parse import unquote

SEPARATORS_PATTERN = re.compile(r'[-_]')


def normalize_name(name: str) -> str:
    """Normalize a directory or artist name for comparison.

    Hyphens and underscores become spaces, the result is lowercased and
    whitespace is collapsed and trimmed.
    """
    if not name:
        return ""

    result = SEPARATORS_PATTERN.sub(' ', name).lower()
    return re.sub(r'\s+', ' ', result).strip()


def normalize_media_name(raw_name: str, artist_name: str, extension: Optional[str] = None) -> str:
    """Normalize a track file name or URL slug into a comparable title.

    Args:
        raw_name: File name or URL path segment
        artist_name: Artist name to remove from the title (any casing/separators)
        extension: File extension to strip first, e.g. ".mp3"

    Returns:
        Lowercase title without separators or artist name, trimmed
    """
    result = raw_name or ""

    if extension and result.lower().endswith(extension.lower()):
        result = result[:-len(extension)]

    result = re.sub(r'\s+', ' ', SEPARATORS_PATTERN.sub(' ', result).lower())

    # Removal and collapsing can form a new occurrence ("arartisttist", "the the x x")
    artist_key = normalize_name(artist_name)
    if artist_key:
        while artist_key in result:
            result = re.sub(r'\s+', ' ', result.replace(artist_key, ''))

    return result.strip()


def name_from_href(href: str, artist_name: str) -> str:
    """Extract the normalized media name from a detail page URL.

    Detail links look like ``https://host/<kind>/<slug>/``; the slug is the
    second-to-last path segment.

    Raises:
        ValueError: If the URL has no slug segment
    """
    segments = (href or "").split('/')
    if len(segments) < 2 or not segments[-2].strip():
        raise ValueError(f"Invalid URL structure, unable to extract media name: {href!r}")

    return normalize_media_name(unquote(segments[-2]), artist_name)
