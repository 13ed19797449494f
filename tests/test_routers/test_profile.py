from app.config import Settings
from app.mappers.response_builder import FETCH_FAILED_MESSAGE
from app.services.page_fetcher import FetchResult
from tests.conftest import page_html


async def test_profile_meta_description_only(client, fake_fetcher):
    fake_fetcher.result = FetchResult(
        url="u", status_code=200, html=page_html(og_description="contact: joe@x.co"), title="T",
    )

    resp = await client.get("/api/profile/joe")

    assert resp.status_code == 200
    data = resp.json()
    assert data["ok"] is True
    assert data["username"] == "joe"
    assert data["biography"] == "contact: joe@x.co"
    assert data["emails_found"] == ["joe@x.co"]
    assert data["phones_found"] == []
    for field in ("is_private", "is_verified", "followers", "following", "posts_count"):
        assert data[field] is None
    assert resp.headers["cache-control"] == "s-maxage=180, stale-while-revalidate=600"


async def test_profile_boot_data(client, fake_fetcher):
    boot = {"props": {"user": {
        "username": "a",
        "is_verified": True,
        "is_private": False,
        "edge_followed_by": {"count": 10},
    }}}
    fake_fetcher.result = FetchResult(url="u", status_code=200, html=page_html(boot_data=boot), title="T")

    data = (await client.get("/api/profile/a")).json()

    assert data["is_verified"] is True
    assert data["is_private"] is False
    assert data["followers"] == 10
    assert data["following"] is None


async def test_profile_total_fetch_failure(client, fake_fetcher):
    fake_fetcher.result = FetchResult(
        url="u", status_code=0, html=None, title=None, error="net::ERR_CONNECTION_RESET at https://...",
    )

    resp = await client.get("/api/profile/a")

    assert resp.status_code == 503
    assert resp.json() == {"ok": False, "error": FETCH_FAILED_MESSAGE}
    assert "ERR_CONNECTION_RESET" not in resp.text


async def test_profile_blank_username(client):
    resp = await client.get("/api/profile/%20")

    assert resp.status_code == 400
    assert resp.json() == {"ok": False, "error": "username required in path"}


async def test_profile_token_required_when_configured(client):
    from app.main import app

    app.state.settings = Settings(_env_file=None, access_token="s3cret")

    missing = await client.get("/api/profile/a")
    wrong = await client.get("/api/profile/a", params={"token": "nope"})
    by_query = await client.get("/api/profile/a", params={"token": "s3cret"})
    by_header = await client.get("/api/profile/a", headers={"X-API-Key": "s3cret"})

    assert missing.status_code == 401
    assert missing.json() == {"ok": False, "error": "Unauthorized"}
    assert wrong.status_code == 401
    assert by_query.status_code == 200
    assert by_header.status_code == 200


async def test_health(client):
    resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
