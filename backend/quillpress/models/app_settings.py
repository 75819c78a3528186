"""Application settings model."""
from datetime import datetime
from sqlalchemy import JSON, Column, DateTime, Integer
from sqlalchemy.dialects.postgresql import JSONB

from quillpress.database import Base


class AppSettings(Base):
    """Single-row JSON document edited by superadmins (storage target, etc.)."""

    __tablename__ = "app_settings"

    # Always 1; see services.app_settings.SETTINGS_ROW_ID
    id = Column(Integer, primary_key=True)
    document = Column(
        "settings_json", JSON().with_variant(JSONB, "postgresql"), nullable=False
    )
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)
