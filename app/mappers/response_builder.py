from app.schemas.profile import CanonicalProfile, ContactSet
from app.schemas.responses import ErrorResponse, ProfileResponse

FETCH_FAILED_MESSAGE = "Fetch failed (profile may be private/blocked or rate-limited)"


def build_profile_response(
    username: str,
    profile: CanonicalProfile,
    contacts: ContactSet,
) -> ProfileResponse:
    """Success reply. Unknown fields stay null; partial data is not an error."""
    return ProfileResponse(
        username=username,
        full_name=profile.full_name,
        biography=profile.bio_text,
        external_url=profile.external_url,
        profile_pic_url=profile.profile_pic_url,
        is_private=profile.is_private,
        is_verified=profile.is_verified,
        followers=profile.followers_count,
        following=profile.following_count,
        posts_count=profile.posts_count,
        emails_found=list(contacts.emails),
        phones_found=list(contacts.phones),
    )


def build_error_response(message: str = FETCH_FAILED_MESSAGE) -> ErrorResponse:
    return ErrorResponse(error=message)
