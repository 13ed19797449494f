import json
import logging

from app.schemas.profile import ProfileFragment

logger = logging.getLogger(__name__)


def _first_string(value) -> str | None:
    """A string as is, or the first item of a list when it is a string."""
    if isinstance(value, list):
        value = value[0] if value else None
    return value if isinstance(value, str) else None


def read_structured_metadata(text: str | None) -> ProfileFragment:
    """Map a schema.org ld+json block onto a fragment. Never raises.

    Only name, image, sameAs and description are read; this source never
    reports counts, verification or privacy.
    """
    if text is None:
        return ProfileFragment()
    try:
        doc = json.loads(text)
    except (ValueError, RecursionError):
        logger.debug("Unparseable structured metadata (%d chars)", len(text))
        return ProfileFragment()
    if not isinstance(doc, dict):
        return ProfileFragment()

    description = doc.get("description")
    name = doc.get("name")
    return ProfileFragment(
        full_name=name if isinstance(name, str) else None,
        profile_pic_url=_first_string(doc.get("image")),
        external_url=_first_string(doc.get("sameAs")),
        bio_text=description if isinstance(description, str) else None,
    )
