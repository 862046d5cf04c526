"""Run orchestration: scan the local library, scrape the site, write the report.

The local library is scanned before the browser starts, so an unreadable
library aborts the run without any network activity.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from musicbaran.dataclasses import ArtistContext, DownloadReport, LibrarySnapshot, ScraperConfig
from musicbaran.library import scan_artist_library
from musicbaran.media import MEDIA_KINDS
from musicbaran.scraper import MusicBaranScraper


class DownloadFinder:
    """Finds download URLs for the media of one artist missing from the local library."""

    def __init__(self, artist_name: str, config: Optional[ScraperConfig] = None) -> None:
        self.config = config or ScraperConfig()
        self.artist = ArtistContext.from_name(artist_name)
        self.logger = logging.getLogger(__name__)

    def scan_library(self) -> LibrarySnapshot:
        """Scan the local library; OSError propagates to the caller."""
        return scan_artist_library(self.config.music_dir, self.artist)

    async def find_downloads(self, snapshot: Optional[LibrarySnapshot] = None) -> DownloadReport:
        """Scrape every media kind and collect the selections into a report."""
        if snapshot is None:
            snapshot = self.scan_library()

        report = DownloadReport(artist=self.artist)

        async with MusicBaranScraper(self.config, self.artist) as scraper:
            for kind in MEDIA_KINDS:
                results = await scraper.get_media_urls(kind, snapshot)
                report.set_results(kind, results)

        return report

    def write_report(self, report: DownloadReport) -> Path:
        """Write the report as JSON into the output directory.

        Returns:
            Path of the written file
        """
        output_dir = Path(self.config.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / report.file_name

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
            f.write('\n')

        self.logger.info(f"Wrote {output_path}")
        return output_path
