"""Local music library scanning.

The library is laid out as ``<root>/<artist>/<album>/<track>.mp3``. Album
identity is the album directory name, track identity is the normalized file
name, so both can be compared with names scraped from the site.
"""

import logging
from pathlib import Path
from typing import List, Set, Tuple, Union

from .dataclasses import ArtistContext, LibrarySnapshot
from .media import TRACK, MediaKind
from .text_utils import normalize_media_name, normalize_name

logger = logging.getLogger(__name__)


def find_artist_directories(root: Union[str, Path], artist_name: str) -> List[Path]:
    """Find every directory under root whose name matches the artist.

    Matching ignores case and treats hyphens, underscores and spaces alike,
    so "The-Weeknd", "the_weeknd" and "THE WEEKND" all match "the weeknd".

    Raises:
        OSError: If root does not exist or cannot be listed
    """
    root_path = Path(root)
    if not root_path.exists():
        raise FileNotFoundError(f"Music directory does not exist: {root}")

    if not root_path.is_dir():
        raise NotADirectoryError(f"Music path is not a directory: {root}")

    target = normalize_name(artist_name)

    return sorted(
        entry for entry in root_path.iterdir()
        if entry.is_dir() and normalize_name(entry.name) == target
    )


def _scan_album_directory(album_dir: Path, artist_name: str) -> Set[str]:
    tracks = set()
    for entry in album_dir.iterdir():
        if entry.is_file() and entry.name.lower().endswith(TRACK.file_extension):
            tracks.add(normalize_media_name(entry.name, artist_name, TRACK.file_extension))
    return tracks


def _scan_artist_directory(artist_dir: Path, artist_name: str) -> Tuple[Set[str], Set[str]]:
    albums = set()
    tracks = set()

    for entry in artist_dir.iterdir():
        if not entry.is_dir():
            continue
        albums.add(entry.name.lower())
        tracks.update(_scan_album_directory(entry, artist_name))

    return albums, tracks


def scan_library(root: Union[str, Path], artist_name: str) -> LibrarySnapshot:
    """Collect the artist's albums and tracks already present locally.

    Args:
        root: Music library root directory
        artist_name: Artist name (any casing/separators)

    Returns:
        LibrarySnapshot merged across all matching artist directories

    Raises:
        OSError: If any directory on the way cannot be read
    """
    artist_dirs = find_artist_directories(root, artist_name)
    if not artist_dirs:
        logger.info(f"No directory for '{artist_name}' found in {root}")

    albums: Set[str] = set()
    tracks: Set[str] = set()

    for artist_dir in artist_dirs:
        dir_albums, dir_tracks = _scan_artist_directory(artist_dir, artist_name)
        logger.debug(f"{artist_dir}: {len(dir_albums)} album(s), {len(dir_tracks)} track(s)")
        albums.update(dir_albums)
        tracks.update(dir_tracks)

    logger.info(f"Local library: {len(albums)} album(s), {len(tracks)} track(s) "
                f"in {len(artist_dirs)} artist director{'y' if len(artist_dirs) == 1 else 'ies'}")

    return LibrarySnapshot(albums=frozenset(albums), tracks=frozenset(tracks))


def scan_artist_library(root: Union[str, Path], artist: ArtistContext) -> LibrarySnapshot:
    """Scan the library for an artist context."""
    return scan_library(root, artist.key)


def exists(name: str, kind: MediaKind, snapshot: LibrarySnapshot) -> bool:
    """Check whether a normalized name is already in the local library."""
    return snapshot.contains(name, kind)
