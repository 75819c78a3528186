"""Slug normalization and uniqueness resolution."""
from __future__ import annotations

import re
import time
from collections.abc import Collection

SLUG_MAX_LENGTH = 120
FALLBACK_PREFIX = "post"

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def normalize(text: str | None, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Turn arbitrary text into a URL-safe slug.

    Runs of characters outside ``[a-z0-9]`` collapse into a single hyphen,
    leading and trailing hyphens are dropped, and the result is cut to
    ``max_length``. Returns an empty string when nothing usable remains.
    """
    if not text:
        return ""
    slug = _NON_SLUG_CHARS.sub("-", text.strip().lower()).strip("-")
    # A cut can land right after a hyphen.
    return slug[:max_length].rstrip("-")


def fallback_slug() -> str:
    """Slug used when a title normalizes to nothing."""
    return f"{FALLBACK_PREFIX}-{int(time.time() * 1000)}"


def resolve(
    candidate: str,
    existing: Collection[str],
    excluding_id: str | None = None,
) -> str:
    """Pick a slug that is not in ``existing``.

    ``existing`` must already leave out the slug of the record identified by
    ``excluding_id``. Collisions get ``-2``, ``-3``, ... appended until a free
    slug is found.
    """
    base = candidate or fallback_slug()
    if base not in existing:
        return base

    counter = 2
    while f"{base}-{counter}" in existing:
        counter += 1
    return f"{base}-{counter}"
