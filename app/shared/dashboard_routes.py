# app/shared/dashboard_routes.py
"""
Dashboard API Endpoints
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.connection import get_db
from app.shared.dashboard_stats import DashboardStats, get_dashboard_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats_endpoint(db: AsyncSession = Depends(get_db)):
    """
    Totals for the dashboard cards.

    Example: GET /api/dashboard/stats
    """
    try:
        return await get_dashboard_stats(db)
    except (SQLAlchemyError, OSError):
        logger.exception("Dashboard stats query failed")
        raise HTTPException(status_code=500, detail="Failed to fetch dashboard stats")
