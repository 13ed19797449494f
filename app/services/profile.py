import logging
from urllib.parse import quote

from app.exceptions.custom import SnapshotFetchError
from app.mappers.boot_data import read_boot_data
from app.mappers.contact_extractor import extract_contacts
from app.mappers.field_resolver import resolve_profile
from app.mappers.meta_tags import read_meta_tags
from app.mappers.response_builder import build_profile_response
from app.mappers.structured_metadata import read_structured_metadata
from app.schemas.profile import CanonicalProfile, ContactSet, FragmentSource, ProfileFragment
from app.schemas.responses import ProfileResponse
from app.schemas.snapshot import RawPageSnapshot
from app.services.page_fetcher import PageFetcherService

logger = logging.getLogger(__name__)

PROFILE_URL_TEMPLATE = "https://www.instagram.com/{username}/?hl=en"


def read_fragments(snapshot: RawPageSnapshot) -> dict[FragmentSource, ProfileFragment]:
    """Run every source reader over the same snapshot. Order does not matter."""
    return {
        FragmentSource.structured_metadata: read_structured_metadata(
            snapshot.structured_metadata_text
        ),
        FragmentSource.meta_tags: read_meta_tags(snapshot.html),
        FragmentSource.boot_data: read_boot_data(snapshot.boot_data_text),
    }


def extract_profile(
    fragments: dict[FragmentSource, ProfileFragment],
) -> tuple[CanonicalProfile, ContactSet]:
    profile, corpus = resolve_profile(fragments)
    return profile, extract_contacts(corpus)


class ProfileService:
    def __init__(self, fetcher: PageFetcherService):
        self._fetcher = fetcher

    async def lookup(self, username: str) -> ProfileResponse:
        """Fetch a public profile page and reconcile what it exposes.

        Raises SnapshotFetchError when the page is unusable.
        """
        url = PROFILE_URL_TEMPLATE.format(username=quote(username, safe=""))
        result = await self._fetcher.fetch(url)
        if result.html is None:
            raise SnapshotFetchError(result.error or "No page content", result.status_code)

        snapshot = RawPageSnapshot.from_html(url, result.html, result.title)
        fragments = read_fragments(snapshot)
        if result.error and all(f.is_empty() for f in fragments.values()):
            raise SnapshotFetchError(result.error, result.status_code)

        profile, contacts = extract_profile(fragments)
        logger.info(
            "Profile %s: sources=%s, unknown=%d, emails=%d, phones=%d",
            username,
            [s.value for s, f in fragments.items() if not f.is_empty()],
            len(profile.unknown_fields()),
            len(contacts.emails),
            len(contacts.phones),
        )
        return build_profile_response(username, profile, contacts)
