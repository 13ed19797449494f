from fastapi import APIRouter, Depends, Response

from app.dependencies import ProfileServiceDep, SettingsDep, require_token
from app.exceptions.custom import InvalidUsernameError
from app.schemas.responses import HealthResponse, ProfileResponse

router = APIRouter()


@router.get(
    "/api/profile/{username}",
    response_model=ProfileResponse,
    dependencies=[Depends(require_token)],
)
async def get_profile(
    username: str,
    response: Response,
    service: ProfileServiceDep,
    settings: SettingsDep,
) -> ProfileResponse:
    username = username.strip()
    if not username:
        raise InvalidUsernameError()

    result = await service.lookup(username)
    response.headers["Cache-Control"] = settings.cache_control
    return result


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok")
