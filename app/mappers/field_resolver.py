from app.schemas.profile import CanonicalProfile, FragmentSource, ProfileFragment

_BOOT = FragmentSource.boot_data
_LD = FragmentSource.structured_metadata
_META = FragmentSource.meta_tags

# Per field: (source, fragment attribute) pairs, first present wins.
FIELD_PRIORITY: dict[str, tuple[tuple[FragmentSource, str], ...]] = {
    "full_name": ((_BOOT, "full_name"), (_LD, "full_name")),
    "bio_text": ((_LD, "bio_text"), (_META, "bio_text")),
    "profile_pic_url": (
        (_BOOT, "profile_pic_url"),
        (_LD, "profile_pic_url"),
        (_META, "profile_pic_url"),
    ),
    "external_url": ((_LD, "external_url"),),
    "is_verified": ((_BOOT, "is_verified"),),
    "is_private": ((_BOOT, "is_private"),),
    "followers_count": ((_BOOT, "followers_count"),),
    "following_count": ((_BOOT, "following_count"),),
    "posts_count": ((_BOOT, "posts_count"),),
    "recent_captions": ((_BOOT, "recent_captions"),),
}

# Order in which bio-like text from every source joins the contact corpus.
_CORPUS_SOURCES = (_LD, _META, _BOOT)


def resolve_field(
    fragments: dict[FragmentSource, ProfileFragment],
    field: str,
):
    """Value of ``field`` from the first source in its priority list that has one."""
    for source, attr in FIELD_PRIORITY[field]:
        fragment = fragments.get(source)
        if fragment is None:
            continue
        value = getattr(fragment, attr)
        if value is not None:
            return value
    return None


def build_corpus(fragments: dict[FragmentSource, ProfileFragment]) -> str:
    """Newline-joined bio text from all sources plus every non-empty caption.

    Losing sources are included: a contact in the meta description still
    counts when the ld+json description won the bio field.
    """
    parts: list[str] = []
    for source in _CORPUS_SOURCES:
        fragment = fragments.get(source)
        if fragment is not None and fragment.bio_text:
            parts.append(fragment.bio_text)
    for source in _CORPUS_SOURCES:
        fragment = fragments.get(source)
        if fragment is not None and fragment.recent_captions:
            parts.extend(c for c in fragment.recent_captions if c)
    return "\n".join(parts)


def resolve_profile(
    fragments: dict[FragmentSource, ProfileFragment],
) -> tuple[CanonicalProfile, str]:
    """Merge source fragments into one profile.

    Returns (canonical_profile, free_text_corpus).
    """
    values = {field: resolve_field(fragments, field) for field in FIELD_PRIORITY}
    if values["recent_captions"] is None:
        values["recent_captions"] = []
    return CanonicalProfile(**values), build_corpus(fragments)
