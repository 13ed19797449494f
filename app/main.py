import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from playwright.async_api import async_playwright

from app.config import Settings
from app.exceptions.custom import (
    InvalidUsernameError,
    SnapshotFetchError,
    UnauthorizedError,
)
from app.exceptions.handlers import (
    invalid_username_error_handler,
    snapshot_fetch_error_handler,
    unauthorized_error_handler,
)
from app.routers.profile import router as profile_router
from app.services.page_fetcher import LAUNCH_ARGS, PageFetcherService
from app.services.profile import ProfileService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(
            headless=settings.browser_headless, args=LAUNCH_ARGS,
        )
        try:
            fetcher = PageFetcherService(
                browser,
                timeout_ms=settings.fetch_timeout_ms,
                user_agent=settings.user_agent,
                accept_language=settings.accept_language,
            )
            app.state.settings = settings
            app.state.profile_service = ProfileService(fetcher)

            yield
        finally:
            await browser.close()


app = FastAPI(title="Profile Lookup", lifespan=lifespan)

app.add_exception_handler(SnapshotFetchError, snapshot_fetch_error_handler)
app.add_exception_handler(UnauthorizedError, unauthorized_error_handler)
app.add_exception_handler(InvalidUsernameError, invalid_username_error_handler)

app.include_router(profile_router)
