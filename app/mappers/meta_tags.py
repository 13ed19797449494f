from bs4 import BeautifulSoup

from app.schemas.profile import ProfileFragment

_IMAGE_PROPERTY = "og:image"
_DESCRIPTION_PROPERTY = "og:description"


def _meta_content(soup: BeautifulSoup, prop: str) -> str | None:
    tag = soup.find("meta", attrs={"property": prop})
    if tag is None:
        return None
    content = tag.get("content")
    return content if isinstance(content, str) else None


def read_meta_tags(html: str | None) -> ProfileFragment:
    """Read the OpenGraph image and description. Fallback of last resort."""
    if not html:
        return ProfileFragment()
    soup = BeautifulSoup(html, "html.parser")
    return ProfileFragment(
        profile_pic_url=_meta_content(soup, _IMAGE_PROPERTY),
        bio_text=_meta_content(soup, _DESCRIPTION_PROPERTY),
    )
