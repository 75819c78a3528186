"""Upload targets for featured images."""
from __future__ import annotations

import re
import time

from quillpress.exceptions import ConfigurationError
from quillpress.models import ContentType
from quillpress.schemas.settings import StorageSettings

DEFAULT_FILENAME = "image.jpg"
REQUIRED_STORAGE_FIELDS = ("bucket", "public_url")

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9._-]")


def sanitize_filename(filename: str | None) -> str:
    return _UNSAFE_FILENAME_CHARS.sub("-", filename or DEFAULT_FILENAME)


def create_upload_draft(
    storage: StorageSettings,
    content_type: ContentType,
    filename: str | None,
) -> dict[str, str]:
    """Build the object key and public URL a client uploads an image to.

    The client performs the upload itself; only the public URL comes back
    to the API, as ``featured_image_url``.
    """
    missing = [
        field for field in REQUIRED_STORAGE_FIELDS if not getattr(storage, field).strip()
    ]
    if missing:
        raise ConfigurationError(f"Missing storage settings: {', '.join(missing)}")

    object_key = (
        f"{content_type.value}s/{int(time.time() * 1000)}-{sanitize_filename(filename)}"
    )
    return {
        "object_key": object_key,
        "public_url": f"{storage.public_url.rstrip('/')}/{object_key}",
        "bucket": storage.bucket,
        "note": f"Upload the file to {storage.provider} under object_key.",
    }
