from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class ProfileResponse(BaseModel):
    ok: Literal[True] = True
    username: str
    full_name: str | None = None
    biography: str | None = None
    external_url: str | None = None
    profile_pic_url: str | None = None
    is_private: bool | None = None
    is_verified: bool | None = None
    followers: int | None = None
    following: int | None = None
    posts_count: int | None = None
    emails_found: list[str] = []
    phones_found: list[str] = []


class ErrorResponse(BaseModel):
    ok: Literal[False] = False
    error: str


class HealthResponse(BaseModel):
    status: str
