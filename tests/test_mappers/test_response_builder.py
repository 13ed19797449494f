from app.mappers.response_builder import (
    FETCH_FAILED_MESSAGE,
    build_error_response,
    build_profile_response,
)
from app.schemas.profile import CanonicalProfile, ContactSet


def test_maps_canonical_fields_to_reply_names():
    profile = CanonicalProfile(
        full_name="Ana",
        bio_text="bio",
        external_url="https://a.example",
        profile_pic_url="p.jpg",
        is_private=False,
        is_verified=True,
        followers_count=10,
        following_count=0,
        posts_count=3,
        recent_captions=["hidden from reply"],
    )
    contacts = ContactSet(emails=["a@b.com"], phones=["+15551234567"])

    data = build_profile_response("ana", profile, contacts).model_dump()

    assert data == {
        "ok": True,
        "username": "ana",
        "full_name": "Ana",
        "biography": "bio",
        "external_url": "https://a.example",
        "profile_pic_url": "p.jpg",
        "is_private": False,
        "is_verified": True,
        "followers": 10,
        "following": 0,
        "posts_count": 3,
        "emails_found": ["a@b.com"],
        "phones_found": ["+15551234567"],
    }


def test_unknown_fields_are_null():
    data = build_profile_response("x", CanonicalProfile(), ContactSet()).model_dump()
    assert data["ok"] is True
    assert data["followers"] is None
    assert data["biography"] is None
    assert data["emails_found"] == []


def test_error_response_shape():
    assert build_error_response().model_dump() == {"ok": False, "error": FETCH_FAILED_MESSAGE}
    assert build_error_response("Unauthorized").model_dump() == {"ok": False, "error": "Unauthorized"}
