"""Pytest configuration and fixtures for musicbaran tests."""

import pytest
from pathlib import Path
from musicbaran.dataclasses import ArtistContext, LibrarySnapshot, ScraperConfig


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b'')
    return path


@pytest.fixture
def artist():
    """Artist context as built from the command line argument."""
    return ArtistContext.from_name("the-weeknd")


@pytest.fixture
def music_library(tmp_path):
    """Create a small music library with two variant folders for the same artist."""
    root = tmp_path / "music"

    _touch(root / "The-Weeknd" / "After Hours" / "The Weeknd - Blinding Lights.mp3")
    _touch(root / "The-Weeknd" / "After Hours" / "the_weeknd-save_your_tears.mp3")
    _touch(root / "The-Weeknd" / "After Hours" / "cover.jpg")
    _touch(root / "The-Weeknd" / "notes.txt")
    _touch(root / "the_weeknd" / "Starboy" / "Starboy.MP3")
    _touch(root / "Other Artist" / "Other Album" / "Other Song.mp3")
    _touch(root / "the weeknd.mp3")

    return root


@pytest.fixture
def snapshot():
    """Library snapshot with one owned album and one owned track."""
    return LibrarySnapshot(
        albums=frozenset({"after hours"}),
        tracks=frozenset({"blinding lights"}),
    )


@pytest.fixture
def test_config(tmp_path):
    """Scraper configuration without retry delays."""
    return ScraperConfig(
        music_dir=str(tmp_path / "music"),
        output_dir=str(tmp_path / "out"),
        max_concurrency=2,
        page_timeout=1000,
        max_retries=2,
        retry_delay=0,
    )


@pytest.fixture
def sample_listing_html():
    """Artist page listing with one link block per media item."""
    return '''
    <html>
    <body>
        <section class="artist">
            <div class="row">
                <div class="col-sm-3">
                    <a href="https://mymusicbaran1.ir/music/the-weeknd-blinding-lights/"><img src="a.jpg"></a>
                    <a href="https://mymusicbaran1.ir/tag/pop/">Pop</a>
                </div>
                <div class="col-sm-3">
                    <a href="https://mymusicbaran1.ir/music/the-weeknd-save-your-tears/"><img src="b.jpg"></a>
                </div>
                <div class="col-sm-3">
                    <a href="https://mymusicbaran1.ir/music/the_weeknd_in_your_eyes/"><img src="c.jpg"></a>
                </div>
            </div>
        </section>
        <div class="row">
            <div class="col-sm-3">
                <a href="https://mymusicbaran1.ir/music/unrelated-sidebar/">Sidebar</a>
            </div>
        </div>
    </body>
    </html>
    '''


@pytest.fixture
def sample_track_html():
    """Track detail page with a 128kbps and a 320kbps link."""
    return '''
    <html>
    <body>
        <div class="dl">
            <div class="link_dl">
                <a class="button--wayra" href="https://dl.mymusicbaran1.ir/The%20Weeknd%20-%20Save%20Your%20Tears%20128.mp3">128</a>
            </div>
            <div class="link_dl">
                <a class="button--wayra" href="https://dl.mymusicbaran1.ir/The%20Weeknd%20-%20Save%20Your%20Tears%20320.mp3">320</a>
            </div>
        </div>
    </body>
    </html>
    '''


@pytest.fixture
def sample_album_html():
    """Album detail page without buttons, only the details paragraph link."""
    return '''
    <html>
    <body>
        <div class="details">
            <p><a href="https://dl.mymusicbaran1.ir/Starboy.zip">Download</a> <a href="/lyrics/">Lyrics</a></p>
        </div>
    </body>
    </html>
    '''
