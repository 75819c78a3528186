"""Settings schemas."""
from typing import Literal

from quillpress.schemas.base import CamelModel


class StorageSettings(CamelModel):
    """Asset storage settings stored in the database."""

    provider: Literal["r2", "cloudinary"] = "r2"
    account_id: str = ""
    bucket: str = ""
    public_url: str = ""


class AppSettings(CamelModel):
    """Top-level application settings."""

    storage: StorageSettings = StorageSettings()


class UploadDraftRequest(CamelModel):
    """Schema for requesting an upload target."""

    filename: str | None = None


class UploadDraft(CamelModel):
    """Object key and public URL for a client-side upload."""

    object_key: str
    public_url: str
    bucket: str
    note: str
