"""Scraping of artist pages and download links on the music site."""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from bs4 import BeautifulSoup
from camoufox import AsyncCamoufox
from tenacity import AsyncRetrying, stop_after_attempt, wait_exponential

from .browser import BrowserManager
from .dataclasses import ArtistContext, LibrarySnapshot, MediaLink, ScraperConfig, UrlSelection
from .media import MediaKind
from .selection import select_download_url
from .text_utils import name_from_href

logger = logging.getLogger(__name__)

LISTING_SELECTOR = "section.artist > div.row > div.col-sm-3 > a:nth-child(1)"


def extract_hrefs(html: str, selectors: Sequence[str]) -> List[str]:
    """Return the hrefs of the first selector that matches anything, in page order."""
    if not html:
        return []

    soup = BeautifulSoup(html, 'html.parser')
    for selector in selectors:
        elements = soup.select(selector)
        if elements:
            return [el['href'] for el in elements if el.get('href')]
    return []


def parse_media_links(hrefs: Sequence[str], artist: ArtistContext) -> List[MediaLink]:
    """Turn listing hrefs into named links, skipping malformed and duplicate ones."""
    links = []
    seen = set()

    for href in hrefs:
        try:
            name = name_from_href(href, artist.key)
        except ValueError as e:
            logger.warning(f"Skipping link: {e}")
            continue

        if name in seen:
            logger.debug(f"Duplicate link for '{name}': {href}")
            continue
        seen.add(name)
        links.append(MediaLink(name=name, url=href))

    return links


class MusicBaranScraper:
    """Finds download URLs for an artist's tracks and albums.

    Each detail page is fetched in its own browser page, at most
    ``config.max_concurrency`` at a time. Links already present in the local
    library are answered from the snapshot without opening a page.
    """

    def __init__(self, config: ScraperConfig, artist: ArtistContext,
                 browser_manager: Optional[BrowserManager] = None) -> None:
        self.config = config
        self.artist = artist
        self.browser_manager = browser_manager or BrowserManager(config)
        self.logger = logging.getLogger(__name__)

        self._semaphore = asyncio.Semaphore(max(1, config.max_concurrency))

        self._camoufox = None
        self._browser = None
        self._browser_context = None

    async def __aenter__(self):
        """Async context manager entry - start browser session."""
        await self._start_browser_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit - cleanup browser session."""
        del exc_type, exc_val, exc_tb
        await self._cleanup_browser_session()

    async def _start_browser_session(self) -> None:
        """Start a browser session shared by all pages."""
        if self._browser is not None:
            return

        browser_options = self.browser_manager.get_browser_options()

        try:
            self._camoufox = AsyncCamoufox(**browser_options)
            self._browser = await self._camoufox.__aenter__()
            self._browser_context = await self._browser.new_context()
            self.logger.debug("Browser session and context started successfully")

        except ImportError as e:
            self.logger.error(f"Missing browser dependencies: {e}")
            await self._cleanup_browser_session()
            raise
        except Exception as e:
            self.logger.error(f"Unexpected error starting browser session: {e}")
            await self._cleanup_browser_session()
            raise

    async def _cleanup_browser_session(self) -> None:
        """Close the browser session."""
        if self._camoufox is not None:
            try:
                await self._camoufox.__aexit__(None, None, None)
                self.logger.debug("Browser session cleaned up")
            except Exception as e:
                self.logger.warning(f"Error during browser cleanup: {e}")
            finally:
                self._camoufox = None
                self._browser = None
                self._browser_context = None

    async def _create_page(self) -> Any:
        """Create a new page with resource blocking and the configured timeout."""
        if self._browser_context is None:
            raise RuntimeError("Browser session not started. Use async context manager.")

        page = await self._browser_context.new_page()
        page.set_default_timeout(self.config.page_timeout)
        await self.browser_manager.setup_resource_blocking(page)
        return page

    async def _fetch_with_retry(self, url: str, selectors: Sequence[str]) -> Optional[str]:
        """Fetch url in a fresh page, retrying failed navigations."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(max(1, self.config.max_retries)),
            wait=wait_exponential(multiplier=self.config.retry_delay, min=self.config.retry_delay, max=30),
            reraise=True,
        ):
            with attempt:
                attempt_number = attempt.retry_state.attempt_number
                if attempt_number > 1:
                    self.logger.info(f"Retrying {url} (attempt {attempt_number})")

                page = await self._create_page()
                try:
                    return await self.browser_manager.fetch_html(page, url, wait_for=selectors)
                finally:
                    await page.close()
        return None

    async def discover_links(self, kind: MediaKind) -> List[MediaLink]:
        """Collect the detail page links listed on the artist page for a kind."""
        listing_url = self.config.listing_url(self.artist, kind)
        self.logger.info(f"Loading {kind.key} listing: {listing_url}")

        html = await self._fetch_with_retry(listing_url, (LISTING_SELECTOR,))
        if not html:
            self.logger.info(f"No {kind.key} listed for {self.artist.name}")
            return []

        links = parse_media_links(extract_hrefs(html, (LISTING_SELECTOR,)), self.artist)
        self.logger.info(f"Found {len(links)} {kind.key} link(s)")
        return links

    async def resolve_link(self, link: MediaLink, kind: MediaKind,
                           snapshot: LibrarySnapshot) -> UrlSelection:
        """Pick the download URL for one link, skipping owned media."""
        if snapshot.contains(link.name, kind):
            self.logger.debug(f"Already in library: {link.name}")
            return UrlSelection.already_owned(page_url=link.url)

        async with self._semaphore:
            html = await self._fetch_with_retry(link.url, kind.download_selectors)

        hrefs = extract_hrefs(html, kind.download_selectors) if html else []
        return select_download_url(hrefs, kind, page_url=link.url)

    async def _resolve_or_skip(self, link: MediaLink, kind: MediaKind,
                               snapshot: LibrarySnapshot) -> Optional[Tuple[str, UrlSelection]]:
        try:
            return link.name, await self.resolve_link(link, kind, snapshot)
        except Exception as e:
            self.logger.error(f"Failed to process {link.url}: {e}")
        return None

    async def get_media_urls(self, kind: MediaKind, snapshot: LibrarySnapshot) -> Dict[str, UrlSelection]:
        """Resolve download URLs for every link of a media kind.

        Returns:
            Mapping of normalized name to selection; failed links are left out
        """
        try:
            links = await self.discover_links(kind)
        except Exception as e:
            self.logger.error(f"Failed to load {kind.key} listing for {self.artist.name}: {e}")
            return {}

        results = await asyncio.gather(
            *(self._resolve_or_skip(link, kind, snapshot) for link in links)
        )

        urls = {}
        for result in results:
            if result is not None:
                name, selection = result
                urls[name] = selection

        skipped = len(links) - len(urls)
        if skipped:
            self.logger.warning(f"{skipped} {kind.key} link(s) failed and were skipped")

        return urls
