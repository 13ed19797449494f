import secrets
from typing import Annotated

from fastapi import Depends, Header, Query, Request

from app.config import Settings
from app.exceptions.custom import UnauthorizedError
from app.services.profile import ProfileService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_profile_service(request: Request) -> ProfileService:
    return request.app.state.profile_service


SettingsDep = Annotated[Settings, Depends(get_settings)]
ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]


def require_token(
    settings: SettingsDep,
    token: Annotated[str | None, Query()] = None,
    x_api_key: Annotated[str | None, Header()] = None,
) -> None:
    """Checks ?token= or X-API-Key when an access token is configured."""
    if not settings.access_token:
        return
    supplied = token or x_api_key or ""
    if not secrets.compare_digest(supplied.encode(), settings.access_token.encode()):
        raise UnauthorizedError()
