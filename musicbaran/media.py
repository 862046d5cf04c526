"""Media kinds scraped from the site: tracks and albums."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class MediaKind:
    """Everything that differs between scraping tracks and scraping albums."""

    key: str  # "tracks" / "albums", also the key in the output file
    section: str  # value of the ?section= query on the artist page
    file_extension: str
    download_selectors: Tuple[str, ...]  # tried in order on the detail page

    def __str__(self) -> str:
        return self.section


TRACK = MediaKind(
    key='tracks',
    section='music',
    file_extension='.mp3',
    download_selectors=('div.dl > div.link_dl > a.button--wayra',),
)

ALBUM = MediaKind(
    key='albums',
    section='album',
    file_extension='.zip',
    download_selectors=('a.button--wayra', '.details > p > a:nth-child(1)'),
)

MEDIA_KINDS = (ALBUM, TRACK)

# Low bitrate links carry this marker in their URL
LOW_BITRATE_MARKER = '128'
