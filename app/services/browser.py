import logging
from typing import Protocol

from playwright.async_api import Browser, Playwright, async_playwright
from pydantic import BaseModel

logger = logging.getLogger(__name__)

_LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
]


class RenderedPage(BaseModel):
    url: str  # final URL after redirects
    html: str


class BrowserSession(Protocol):
    async def open_page(self, url: str, user_agent: str | None = None) -> RenderedPage: ...

    async def close(self) -> None: ...


class BrowserLauncher(Protocol):
    async def launch(self) -> BrowserSession: ...


class PlaywrightSession:
    def __init__(self, playwright: Playwright, browser: Browser, navigation_timeout_ms: int):
        self._playwright = playwright
        self._browser = browser
        self._timeout = navigation_timeout_ms

    async def open_page(self, url: str, user_agent: str | None = None) -> RenderedPage:
        """Navigate in a fresh context and return the rendered DOM as HTML."""
        context = await self._browser.new_context(user_agent=user_agent)
        page = await context.new_page()
        await page.goto(url, wait_until="networkidle", timeout=self._timeout)
        html = await page.content()
        return RenderedPage(url=page.url, html=html)

    async def close(self) -> None:
        try:
            await self._browser.close()
        finally:
            await self._playwright.stop()


class PlaywrightLauncher:
    def __init__(self, headless: bool = True, navigation_timeout_ms: int = 30000):
        self._headless = headless
        self._timeout = navigation_timeout_ms

    async def launch(self) -> PlaywrightSession:
        playwright = await async_playwright().start()
        try:
            browser = await playwright.chromium.launch(
                headless=self._headless, args=_LAUNCH_ARGS
            )
        except Exception:
            await playwright.stop()
            raise
        logger.debug("Launched Chromium (headless=%s)", self._headless)
        return PlaywrightSession(playwright, browser, self._timeout)
