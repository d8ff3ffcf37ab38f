"""
Dev Monitor Router - Development-only endpoint for server error inspection.
"""
import logging
from fastapi import APIRouter, Request, Depends, HTTPException
from sqlalchemy.orm import Session

from ..config import settings
from ..db import get_db
from ..models import ErrorLog

router = APIRouter(prefix="/dev", tags=["dev-monitor"])
logger = logging.getLogger(__name__)


def is_dev_mode() -> bool:
    """Check if DEV_MODE is enabled."""
    return settings.DEV_MODE


@router.get("/error-logs")
def get_error_logs(
    request: Request,
    limit: int = 50,
    db: Session = Depends(get_db)
):
    """
    Get the most recent server errors recorded by the controller decorator.

    Args:
        limit: Maximum number of entries to return (default 50, max 1000)

    Raises:
        404: If DEV_MODE is not enabled
        400: If limit exceeds 1000
    """
    if not is_dev_mode():
        logger.warning(
            "Attempt to access /dev/error-logs with DEV_MODE disabled from IP %s",
            request.client.host if request.client else 'unknown'
        )
        raise HTTPException(status_code=404, detail="Not found")

    if limit > 1000:
        raise HTTPException(
            status_code=400,
            detail="Limit cannot exceed 1000 entries"
        )

    entries = db.query(ErrorLog).order_by(ErrorLog.created_at.desc(), ErrorLog.id.desc()).limit(limit).all()

    logger.info("Dev error logs accessed: limit=%s, results=%s", limit, len(entries))

    return [entry.to_dict() for entry in entries]
