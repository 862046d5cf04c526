"""Download URL selection for a media detail page."""

import logging
from typing import Iterable, Optional

from .dataclasses import UrlSelection
from .media import LOW_BITRATE_MARKER, MediaKind

logger = logging.getLogger(__name__)


def filter_candidates(hrefs: Iterable[Optional[str]], kind: MediaKind) -> list[str]:
    """Keep hrefs that point at a file of the media kind, in page order."""
    return [href for href in hrefs if href and href.endswith(kind.file_extension)]


def select_download_url(hrefs: Iterable[Optional[str]], kind: MediaKind,
                        page_url: Optional[str] = None) -> UrlSelection:
    """Pick the best download URL among the links of a detail page.

    A single candidate is taken as is. With several candidates the first one
    without the low bitrate marker wins; if all of them carry it the result
    is ``low_bitrate_only`` and no URL is chosen.
    """
    candidates = tuple(filter_candidates(hrefs, kind))

    if not candidates:
        logger.warning(f"No {kind.file_extension.upper()} URLs found: {page_url}")
        return UrlSelection(status='no_candidates', page_url=page_url)

    if len(candidates) == 1:
        return UrlSelection(status='found', url=candidates[0], candidates=candidates, page_url=page_url)

    for candidate in candidates:
        if LOW_BITRATE_MARKER not in candidate:
            return UrlSelection(status='found', url=candidate, candidates=candidates, page_url=page_url)

    logger.warning(f"Only {LOW_BITRATE_MARKER}kbps URLs found ({len(candidates)}): {page_url}")
    return UrlSelection(status='low_bitrate_only', candidates=candidates, page_url=page_url)
