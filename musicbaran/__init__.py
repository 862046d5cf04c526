"""Find download URLs for an artist's music missing from the local library."""

__version__ = "0.2.0"

from .dataclasses import (
    ArtistContext,
    DownloadReport,
    LibrarySnapshot,
    MediaLink,
    ScraperConfig,
    UrlSelection,
)
from .media import ALBUM, TRACK, MediaKind
from .text_utils import normalize_media_name, normalize_name
from .library import exists, find_artist_directories, scan_library
from .selection import select_download_url
from .core import DownloadFinder

# Internal components (for advanced usage)
from .browser import BrowserManager
from .scraper import MusicBaranScraper

__all__ = [
    # Version
    '__version__',

    # Core API
    'DownloadFinder',
    'ScraperConfig',
    'DownloadReport',

    # Local library
    'scan_library',
    'find_artist_directories',
    'exists',
    'LibrarySnapshot',

    # Names and selection
    'normalize_name',
    'normalize_media_name',
    'select_download_url',
    'ArtistContext',
    'MediaLink',
    'UrlSelection',
    'MediaKind',
    'TRACK',
    'ALBUM',

    # Internal components (for advanced usage)
    'BrowserManager',
    'MusicBaranScraper',
]
