"""Load and persist the application settings document."""
from datetime import datetime

from pydantic import ValidationError
from sqlalchemy.orm import Session

from quillpress.models.app_settings import AppSettings as AppSettingsModel
from quillpress.schemas.settings import AppSettings

SETTINGS_ROW_ID = 1


def load_app_settings(db: Session) -> AppSettings:
    """Return persisted settings, or defaults when none are stored or valid."""
    record = db.get(AppSettingsModel, SETTINGS_ROW_ID)
    if not record:
        return AppSettings()
    try:
        return AppSettings.model_validate(record.document or {})
    except ValidationError:
        return AppSettings()


def save_app_settings(db: Session, payload: AppSettings) -> AppSettings:
    """Upsert the settings row."""
    document = payload.model_dump(mode="json")
    record = db.get(AppSettingsModel, SETTINGS_ROW_ID)
    if record is None:
        record = AppSettingsModel(id=SETTINGS_ROW_ID, document=document)
        db.add(record)
    else:
        record.document = document
    record.updated_at = datetime.utcnow()
    db.commit()
    return payload
