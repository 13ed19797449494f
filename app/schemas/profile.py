from enum import StrEnum

from pydantic import BaseModel


class FragmentSource(StrEnum):
    structured_metadata = "structured_metadata"
    meta_tags = "meta_tags"
    boot_data = "boot_data"


class ProfileFragment(BaseModel):
    """Partial profile reported by one source. None means the source said nothing."""

    full_name: str | None = None
    bio_text: str | None = None
    profile_pic_url: str | None = None
    external_url: str | None = None
    is_verified: bool | None = None
    is_private: bool | None = None
    followers_count: int | None = None
    following_count: int | None = None
    posts_count: int | None = None
    recent_captions: list[str] | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in type(self).model_fields)


class CanonicalProfile(BaseModel):
    """Resolved profile. None is "unknown"; "" is a value a source explicitly reported."""

    full_name: str | None = None
    bio_text: str | None = None
    profile_pic_url: str | None = None
    external_url: str | None = None
    is_verified: bool | None = None
    is_private: bool | None = None
    followers_count: int | None = None
    following_count: int | None = None
    posts_count: int | None = None
    recent_captions: list[str] = []

    def unknown_fields(self) -> list[str]:
        return [name for name in type(self).model_fields if getattr(self, name) is None]


class ContactSet(BaseModel):
    emails: list[str] = []
    phones: list[str] = []  # digits with optional leading '+'
