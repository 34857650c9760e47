"""
Shared headless browser for DOM-scraping fetchers.

One Chromium process per owner, launched on first use and closed explicitly
by whoever created the session. Concurrent scrapes share the process but each
gets its own page.
"""
import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from playwright.async_api import Browser, Page, Playwright, async_playwright

logger = logging.getLogger(__name__)

HEADLESS = os.getenv("BROWSER_HEADLESS", "true").lower() != "false"

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-blink-features=AutomationControlled",
    "--disable-features=VizDisplayCompositor",
    "--disable-dev-shm-usage",
    "--no-first-run",
    "--no-default-browser-check",
    "--disable-default-apps",
]

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

EXTRA_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}

# Runs before any page script so sites can't read the automation flag
HIDE_WEBDRIVER_JS = """
Object.defineProperty(navigator, 'webdriver', { get: () => undefined });
"""


class BrowserSession:
    """Lazily launched Playwright Chromium shared across fetchers."""

    def __init__(self, headless: bool = HEADLESS):
        self.headless = headless
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._launch_lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        return self._browser is not None

    async def _ensure_browser(self) -> Browser:
        async with self._launch_lock:
            if self._browser is None:
                pw = await async_playwright().start()
                try:
                    browser = await pw.chromium.launch(
                        headless=self.headless,
                        args=LAUNCH_ARGS,
                    )
                except Exception as e:
                    logger.error(f"[Browser] Chromium launch failed: {e}")
                    await pw.stop()
                    raise
                self._playwright, self._browser = pw, browser
                logger.info("[Browser] Chromium launched")
        return self._browser

    @asynccontextmanager
    async def page(self) -> AsyncIterator[Page]:
        """New stealth page on the shared browser; always closed on exit."""
        browser = await self._ensure_browser()
        page = await browser.new_page(
            user_agent=USER_AGENT,
            extra_http_headers=EXTRA_HEADERS,
        )
        try:
            await page.add_init_script(HIDE_WEBDRIVER_JS)
            yield page
        finally:
            await page.close()

    async def close(self) -> None:
        if self._browser is not None:
            await self._browser.close()
            self._browser = None
            logger.info("[Browser] Chromium closed")
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None
