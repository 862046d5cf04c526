"""Browser configuration, resource blocking and page fetching."""

import logging
from typing import Any, Dict, Optional, Sequence

from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from .dataclasses import ScraperConfig


class PageLoadError(Exception):
    """Navigation returned an error status or no response at all."""
    def __init__(self, url: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        reason = f"status {status_code}" if status_code else "no response"
        super().__init__(f"Failed to load {url} ({reason})")


class BrowserManager:
    """Manages browser options, resource blocking and HTML fetching."""

    # Download pages only need the DOM
    BLOCKED_RESOURCE_TYPES = {'image', 'media', 'font', 'stylesheet'}
    BLOCKED_PATHS = {
        '.jpg',
        '.jpeg',
        '.png',
        '.gif',
        '.webp',
        '.svg',
        '.ico',
        '.css',
        '.woff',
        '.woff2',
        '.ttf',
        '.eot'
    }

    def __init__(self, config: ScraperConfig) -> None:
        self.config = config
        self.logger = logging.getLogger(__name__)

        self.bandwidth_stats = {
            'total_requests': 0,
            'blocked_requests': 0,
            'blocked_types': {}
        }

    def get_browser_options(self) -> Dict[str, Any]:
        """Get Camoufox browser options."""
        browser_options = {
            'headless': self.config.headless,
            'humanize': False,
            'window': (1280, 720),
        }

        if not self.config.headless:
            self.logger.info("Running in non-headless mode for debugging")

        return browser_options

    def _should_block(self, request_url: str, resource_type: str) -> bool:
        if resource_type in self.BLOCKED_RESOURCE_TYPES:
            return True
        url = request_url.lower().split('?', 1)[0]
        return any(url.endswith(path_pattern) for path_pattern in self.BLOCKED_PATHS)

    async def setup_resource_blocking(self, page: Any) -> None:
        """Abort requests for images, fonts and stylesheets."""
        if not self.config.resource_blocking_enabled:
            return

        async def handle_route(route):
            request_url = route.request.url
            resource_type = route.request.resource_type
            self.bandwidth_stats['total_requests'] += 1

            if self._should_block(request_url, resource_type):
                await route.abort()
                self.bandwidth_stats['blocked_requests'] += 1
                self.bandwidth_stats['blocked_types'][resource_type] = self.bandwidth_stats['blocked_types'].get(resource_type, 0) + 1
            else:
                await route.continue_()

        await page.route("**/*", handle_route)
        self.logger.debug("Set up resource blocking for page")

    async def fetch_html(self, page: Page, url: str, wait_for: Sequence[str] = ()) -> Optional[str]:
        """Navigate to url and return the page HTML.

        Args:
            page: Playwright page instance
            url: Target URL
            wait_for: CSS selectors tried in order; the first one that shows up
                before the timeout ends the wait

        Returns:
            HTML content, or None if none of the selectors appeared

        Raises:
            PageLoadError: On an HTTP error status
            PlaywrightTimeoutError: If navigation itself times out
        """
        self.logger.debug(f"Navigating to {url}")

        response = await page.goto(url, wait_until='domcontentloaded', timeout=self.config.page_timeout)
        if response is None:
            raise PageLoadError(url)
        if response.status >= 400:
            raise PageLoadError(url, response.status)

        if wait_for:
            found = await self.wait_for_any(page, wait_for)
            if found is None:
                self.logger.info(f"None of {list(wait_for)} appeared on {url}")
                return None

        html_content = await page.content()
        self.logger.debug(f"Received HTML content: {len(html_content)} bytes")
        return html_content

    async def wait_for_any(self, page: Page, selectors: Sequence[str]) -> Optional[str]:
        """Wait for the first selector that appears, trying them in order.

        Returns:
            The selector that matched, or None
        """
        for selector in selectors:
            try:
                await page.wait_for_selector(selector, state='attached', timeout=self.config.page_timeout)
                return selector
            except PlaywrightTimeoutError:
                self.logger.debug(f"Timed out waiting for '{selector}' on {page.url}")
        return None
