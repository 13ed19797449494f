import re

from app.schemas.profile import ContactSet

# The lookbehind pins the start to the beginning of the local part.
_EMAIL_RE = re.compile(
    r"(?<![A-Za-z0-9._%+\-])[A-Za-z0-9._%+\-]+@[A-Za-z0-9\-]+(?:\.[A-Za-z0-9\-]+)*\.[A-Za-z]{2,}",
)

# Whole run of digits and separators, starting and ending on a digit, never across lines.
_PHONE_RE = re.compile(
    r"\+?\d[\d() \-]*\d",
)

MIN_PHONE_DIGITS = 9


def normalize_phone(phone: str) -> str:
    """Keep digits and a single leading '+'."""
    digits = "".join(c for c in phone if c.isdigit())
    return f"+{digits}" if phone.startswith("+") else digits


def _unique(items) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def _is_glued(text: str, start: int, end: int) -> bool:
    """True when the run is part of a longer token."""
    before = text[start - 1] if start > 0 else ""
    after = text[end] if end < len(text) else ""
    return (
        bool(before) and (before.isalnum() or before in "_+")
    ) or (
        bool(after) and (after.isalnum() or after == "_")
    )


def _phone_candidates(text: str):
    # Each run is consumed whole, so a rejected run is never rescanned from its middle.
    for m in _PHONE_RE.finditer(text):
        if not _is_glued(text, m.start(), m.end()):
            yield m.group(0)


def extract_emails(text: str) -> list[str]:
    return _unique(_EMAIL_RE.findall(text))


def extract_phones(text: str) -> list[str]:
    phones = (normalize_phone(c) for c in _phone_candidates(text))
    return _unique(p for p in phones if len(p.lstrip("+")) >= MIN_PHONE_DIGITS)


def extract_contacts(corpus: str | None) -> ContactSet:
    """Emails and normalized phones found in free text, first-seen order, no duplicates."""
    if not corpus:
        return ContactSet()
    return ContactSet(emails=extract_emails(corpus), phones=extract_phones(corpus))
