"""Settings API router."""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from quillpress.auth import Caller, require_super_admin
from quillpress.database import get_db
from quillpress.exceptions import InfrastructureError
from quillpress.schemas.settings import AppSettings
from quillpress.services.app_settings import load_app_settings, save_app_settings

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("/settings", response_model=AppSettings)
def get_settings(
    _: Caller = Depends(require_super_admin),
    db: Session = Depends(get_db),
):
    """Return persisted application settings or defaults."""
    return load_app_settings(db)


@router.put("/settings", response_model=AppSettings)
def update_settings(
    payload: AppSettings,
    _: Caller = Depends(require_super_admin),
    db: Session = Depends(get_db),
):
    """Upsert application settings."""
    try:
        return save_app_settings(db, payload)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to save settings")
        raise InfrastructureError(f"Failed to save settings: {exc}") from exc
