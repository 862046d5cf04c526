from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Literal, Optional, Tuple
from urllib.parse import quote

from musicbaran.media import MediaKind
from musicbaran.text_utils import normalize_name

DEFAULT_MUSIC_DIR = "/media/moosavi/files/music"

SelectionStatus = Literal['found', 'already_owned', 'no_candidates', 'low_bitrate_only']


@dataclass(repr=True)
class ScraperConfig:
    """Configuration for a scraping run."""
    # Site configuration
    base_url: str = "https://mymusicbaran1.ir"

    # Local library and output
    music_dir: str = DEFAULT_MUSIC_DIR
    output_dir: str = '.'

    # Browser and retry settings
    max_concurrency: int = 4  # Detail pages open at the same time
    page_timeout: int = 30000  # Milliseconds, applies to navigation and selector waits
    max_retries: int = 3
    retry_delay: float = 2.0
    headless: bool = True  # Set to False to watch the browser

    # Resource blocking
    resource_blocking_enabled: bool = True

    def artist_url(self, artist: 'ArtistContext') -> str:
        """Build the artist page URL on the site."""
        return f"{self.base_url.rstrip('/')}/artists/{quote(artist.name)}"

    def listing_url(self, artist: 'ArtistContext', kind: MediaKind) -> str:
        """Build the artist page URL filtered to one media section."""
        return f"{self.artist_url(artist)}/?section={kind.section}"


@dataclass(frozen=True)
class ArtistContext:
    """Artist name as given by the user plus its normalized key."""
    name: str
    key: str

    @classmethod
    def from_name(cls, name: str) -> 'ArtistContext':
        name = name.strip()
        if not name:
            raise ValueError("Artist name must not be empty")
        return cls(name=name, key=normalize_name(name))


@dataclass(frozen=True)
class LibrarySnapshot:
    """Album and track names already present in the local library."""
    albums: FrozenSet[str] = frozenset()
    tracks: FrozenSet[str] = frozenset()

    def names_for(self, kind: MediaKind) -> FrozenSet[str]:
        """Return the name set that matches the media kind."""
        if kind.key == 'albums':
            return self.albums
        if kind.key == 'tracks':
            return self.tracks
        raise ValueError(f"Unknown media kind: {kind.key}")

    def contains(self, name: str, kind: MediaKind) -> bool:
        return name in self.names_for(kind)


@dataclass(frozen=True)
class MediaLink:
    """A detail page link discovered on the artist page."""
    name: str
    url: str


@dataclass(frozen=True)
class UrlSelection:
    """Outcome of picking a download URL for one media item."""
    status: SelectionStatus
    url: Optional[str] = None
    candidates: Tuple[str, ...] = ()
    page_url: Optional[str] = None

    @classmethod
    def already_owned(cls, page_url: Optional[str] = None) -> 'UrlSelection':
        return cls(status='already_owned', page_url=page_url)

    @property
    def is_found(self) -> bool:
        return self.status == 'found'

    def to_json_value(self) -> Optional[str]:
        """Value written to the output file: URL, "" for owned, None otherwise."""
        if self.status == 'found':
            return self.url
        if self.status == 'already_owned':
            return ""
        return None


@dataclass(repr=True)
class DownloadReport:
    """Download URLs found for one artist, keyed by normalized name."""
    artist: ArtistContext
    tracks: Dict[str, UrlSelection] = field(default_factory=dict)
    albums: Dict[str, UrlSelection] = field(default_factory=dict)

    @property
    def file_name(self) -> str:
        return f"{self.artist.key}.json"

    def set_results(self, kind: MediaKind, results: Dict[str, UrlSelection]) -> None:
        if kind.key == 'albums':
            self.albums = dict(results)
        elif kind.key == 'tracks':
            self.tracks = dict(results)
        else:
            raise ValueError(f"Unknown media kind: {kind.key}")

    def counts(self) -> Dict[str, Dict[str, int]]:
        """Count selections per media kind and status."""
        summary = {}
        for key, results in (('tracks', self.tracks), ('albums', self.albums)):
            per_status: Dict[str, int] = {}
            for selection in results.values():
                per_status[selection.status] = per_status.get(selection.status, 0) + 1
            summary[key] = per_status
        return summary

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the output file schema {"tracks": {...}, "albums": {...}}."""
        return {
            'tracks': {name: sel.to_json_value() for name, sel in sorted(self.tracks.items())},
            'albums': {name: sel.to_json_value() for name, sel in sorted(self.albums.items())},
        }
