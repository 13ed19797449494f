"""Boot-data reader: find the profile owner inside the page's initial state.

The payload schema changes often, so instead of walking known paths we
search the whole graph for the first object that looks like a user: a
non-null ``username`` plus an ``is_verified`` or ``is_private`` key.
Traversal is pre-order depth-first, mapping keys in insertion order and
list items in index order, so the same node wins on every run. Each
container is visited at most once, which keeps self-referencing graphs
finite.
"""

import json
import logging
import math
from collections.abc import Mapping

from app.schemas.profile import ProfileFragment

logger = logging.getLogger(__name__)

MAX_RECENT_CAPTIONS = 6

_FLAG_KEYS = ("is_verified", "is_private")


def is_user_node(node) -> bool:
    return (
        isinstance(node, Mapping)
        and node.get("username") is not None
        and any(key in node for key in _FLAG_KEYS)
    )


def find_user_node(root) -> Mapping | None:
    """Return the first user-shaped mapping under ``root``, or None."""
    stack = [root]
    visited: set[int] = set()
    while stack:
        node = stack.pop()
        if not isinstance(node, (Mapping, list, tuple)) or id(node) in visited:
            continue
        visited.add(id(node))
        if is_user_node(node):
            return node
        children = node.values() if isinstance(node, Mapping) else node
        # Reversed so the first child is popped first.
        stack.extend(reversed(list(children)))
    return None


def _dig(value, *path):
    """Follow keys/indexes through nested containers; None when the path breaks."""
    for step in path:
        if isinstance(step, int):
            if not isinstance(value, list) or len(value) <= step:
                return None
        elif not isinstance(value, Mapping):
            return None
        elif step not in value:
            return None
        value = value[step]
    return value


def _as_count(value) -> int | None:
    """Any JSON number except booleans and NaN/Infinity, as an int."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return None


def _as_bool(value) -> bool | None:
    return value if isinstance(value, bool) else None


def _as_str(value) -> str | None:
    return value if isinstance(value, str) else None


def _count(user: Mapping, edge_key: str, flat_key: str) -> int | None:
    nested = _as_count(_dig(user, edge_key, "count"))
    if nested is not None:
        return nested
    return _as_count(user.get(flat_key))


def _captions(user: Mapping) -> list[str]:
    edges = _dig(user, "edge_owner_to_timeline_media", "edges")
    if not isinstance(edges, list):
        return []
    captions: list[str] = []
    for edge in edges[:MAX_RECENT_CAPTIONS]:
        text = _dig(edge, "node", "edge_media_to_caption", "edges", 0, "node", "text")
        captions.append(text if isinstance(text, str) else "")
    return captions


def map_user_node(user: Mapping) -> ProfileFragment:
    pic = _as_str(user.get("profile_pic_url_hd")) or _as_str(user.get("profile_pic_url"))
    return ProfileFragment(
        full_name=_as_str(user.get("full_name")),
        is_verified=_as_bool(user.get("is_verified")),
        is_private=_as_bool(user.get("is_private")),
        profile_pic_url=pic,
        followers_count=_count(user, "edge_followed_by", "follower_count"),
        following_count=_count(user, "edge_follow", "following_count"),
        posts_count=_count(user, "edge_owner_to_timeline_media", "media_count"),
        recent_captions=_captions(user),
    )


def read_boot_data(text: str | None) -> ProfileFragment:
    """Parse the boot-data script and map the first user-shaped node. Never raises."""
    if text is None:
        return ProfileFragment()
    try:
        payload = json.loads(text)
    except (ValueError, RecursionError):
        logger.debug("Unparseable boot data (%d chars)", len(text))
        return ProfileFragment()

    user = find_user_node(payload)
    if user is None:
        logger.debug("No user-shaped node in boot data")
        return ProfileFragment()
    return map_user_node(user)
