import json

import httpx
import pytest
from httpx import ASGITransport

from app.config import Settings
from app.services.page_fetcher import FetchResult


def page_html(
    *,
    ld_json=None,
    boot_data=None,
    og_description: str | None = None,
    og_image: str | None = None,
) -> str:
    """Render a minimal profile page the way the browser hands it back."""
    head = ["<title>Profile</title>"]
    if og_description is not None:
        head.append(f'<meta property="og:description" content="{og_description}">')
    if og_image is not None:
        head.append(f'<meta property="og:image" content="{og_image}">')
    if ld_json is not None:
        text = ld_json if isinstance(ld_json, str) else json.dumps(ld_json)
        head.append(f'<script type="application/ld+json">{text}</script>')
    body = ""
    if boot_data is not None:
        text = boot_data if isinstance(boot_data, str) else json.dumps(boot_data)
        body = f'<script id="__NEXT_DATA__" type="application/json">{text}</script>'
    return f"<html><head>{''.join(head)}</head><body>{body}</body></html>"


class FakeFetcher:
    def __init__(self, result: FetchResult | None = None):
        self.result = result
        self.urls: list[str] = []

    async def fetch(self, url: str) -> FetchResult:
        self.urls.append(url)
        if self.result is None:
            return FetchResult(url=url, status_code=200, html=page_html(), title="Profile")
        return self.result


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def settings():
    return Settings(_env_file=None, access_token="")


@pytest.fixture
async def client(settings, fake_fetcher):
    from app.main import app
    from app.services.profile import ProfileService

    # No lifespan here: a real browser is never launched in tests.
    app.state.settings = settings
    app.state.profile_service = ProfileService(fake_fetcher)
    async with httpx.AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
