import logging
from dataclasses import dataclass

from playwright.async_api import Browser, BrowserContext
from playwright.async_api import Error as PlaywrightError

logger = logging.getLogger(__name__)

LAUNCH_ARGS = [
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--disable-extensions",
    "--no-first-run",
    "--disable-default-apps",
]

_VIEWPORT = {"width": 1200, "height": 800}


@dataclass(frozen=True)
class FetchResult:
    url: str
    status_code: int
    html: str | None
    title: str | None
    error: str | None = None


class PageFetcherService:
    """Renders one page per call in a fresh context of a shared headless browser."""

    def __init__(
        self,
        browser: Browser,
        *,
        timeout_ms: int,
        user_agent: str,
        accept_language: str,
    ):
        self._browser = browser
        self._timeout_ms = timeout_ms
        self._user_agent = user_agent
        self._accept_language = accept_language

    async def fetch(self, url: str) -> FetchResult:
        """Load ``url`` once and return its DOM. Never raises."""
        context: BrowserContext | None = None
        try:
            context = await self._browser.new_context(
                user_agent=self._user_agent,
                viewport=_VIEWPORT,
                extra_http_headers={"Accept-Language": self._accept_language},
            )
            page = await context.new_page()
            response = await page.goto(
                url, wait_until="domcontentloaded", timeout=self._timeout_ms,
            )
            if response is None:
                return FetchResult(url=url, status_code=0, html=None, title=None,
                                   error="No response received")

            html = await page.content()
            title = await page.title()
            error = None if response.ok else f"HTTP {response.status}"
            return FetchResult(
                url=url,
                status_code=response.status,
                html=html,
                title=title,
                error=error,
            )
        except PlaywrightError as exc:
            logger.warning("Page fetch failed for %s: %s", url, exc)
            return FetchResult(url=url, status_code=0, html=None, title=None, error=str(exc))
        finally:
            if context is not None:
                try:
                    await context.close()
                except PlaywrightError:
                    logger.debug("Failed to close browser context for %s", url)
