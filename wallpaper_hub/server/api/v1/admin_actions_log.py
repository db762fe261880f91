"""
Admin Actions Log Endpoints.

Search, summarise, export and append to the admin audit trail. Exporting and
deleting entries are reserved to super admins.
"""

import csv
import io
import json
from datetime import date, datetime, time, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from wallpaper_hub.core.database import utc_now
from wallpaper_hub.core.database.repositories.admin import ActionLogQuery, AdminActionLogRepository
from wallpaper_hub.core.logging_config import get_logger
from wallpaper_hub.core.models.io.admin import (
    ActionLogCreate,
    ActionLogCreated,
    ActionLogPage,
    ActionLogRead,
    ActionLogStatsRead,
)
from wallpaper_hub.core.models.io.envelope import DataEnvelope, PaginationInfo, error_responses
from wallpaper_hub.server.exceptions import NotFoundError
from wallpaper_hub.server.services.audit import record_admin_action
from wallpaper_hub.server.services.deps import AdminDep, ClientDep, SessionDep, SuperAdminDep

logger = get_logger(__name__)

router = APIRouter(prefix="/admin/actions-log", tags=["admin"])

EXPORT_LIMIT = 10000
STATS_WINDOW = timedelta(days=30)
CSV_HEADER = [
    "ID",
    "Admin Email",
    "User Email",
    "Action Type",
    "Duration (Days)",
    "Notes",
    "Timestamp",
    "Action Details",
]


def action_log_query(
    admin_email: Optional[str] = Query(default=None, max_length=320),
    user_email: Optional[str] = Query(default=None, max_length=320),
    action_type: Optional[str] = Query(default=None, description="Exact action type; `all` disables the filter"),
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None, description="Inclusive"),
) -> ActionLogQuery:
    return ActionLogQuery(
        admin_email=admin_email,
        user_email=user_email,
        action_type=action_type,
        start=datetime.combine(start_date, time.min) if start_date else None,
        end=datetime.combine(end_date, time.max) if end_date else None,
    )


def render_csv(entries) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_HEADER)
    for entry in entries:
        writer.writerow(
            [
                entry.id,
                entry.admin_email or "",
                entry.user_email or "",
                entry.action_type,
                "" if entry.duration_days is None else entry.duration_days,
                entry.notes or "",
                entry.timestamp.isoformat(),
                json.dumps(entry.action_details or {}, sort_keys=True),
            ]
        )
    return buffer.getvalue()


@router.get(
    "",
    response_model=ActionLogPage,
    summary="Search Admin Actions",
    description="Admin actions, newest first, with filters and pagination.",
    responses=error_responses(400, 401, 403),
)
async def list_actions(
    session: SessionDep,
    admin: AdminDep,
    query: ActionLogQuery = Depends(action_log_query),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=50, ge=1, le=500),
):
    """
    Search the admin actions log.

    - **admin_email** / **user_email**: case-insensitive substring match.
    - **action_type**: exact match, `all` for every type.
    - **start_date** / **end_date**: inclusive calendar days.
    """
    result = await AdminActionLogRepository(session).search(query, page, limit)
    return ActionLogPage(
        data=[ActionLogRead.model_validate(entry) for entry in result.items],
        pagination=PaginationInfo(page=page, limit=limit, total=result.total, pages=result.pages),
    )


@router.get(
    "/stats",
    response_model=DataEnvelope[ActionLogStatsRead],
    summary="Admin Action Statistics",
    description="Total entries, entries per action type and entries in the last 30 days.",
    responses=error_responses(401, 403),
)
async def action_stats(session: SessionDep, admin: AdminDep):
    stats = await AdminActionLogRepository(session).stats(utc_now() - STATS_WINDOW)
    return DataEnvelope(data=ActionLogStatsRead(total=stats.total, by_action=stats.by_action, recent_30_days=stats.recent))


@router.get(
    "/export",
    summary="Export Admin Actions",
    description="CSV export of matching admin actions, at most 10000 rows. Super admins only.",
    response_class=Response,
    responses={200: {"content": {"text/csv": {}}}, **error_responses(401, 403)},
)
async def export_actions(
    session: SessionDep,
    admin: SuperAdminDep,
    query: ActionLogQuery = Depends(action_log_query),
):
    entries = await AdminActionLogRepository(session).export(query, EXPORT_LIMIT)
    filename = f"admin-actions-log-{utc_now().strftime('%Y-%m-%d')}.csv"
    logger.info(f"Admin actions log exported by {admin.email}: {len(entries)} rows")
    return Response(
        content=render_csv(entries),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post(
    "",
    status_code=201,
    response_model=DataEnvelope[ActionLogCreated],
    summary="Record Admin Action",
    description="Append an action performed by the calling admin.",
    responses=error_responses(400, 401, 403),
)
async def create_action(body: ActionLogCreate, session: SessionDep, admin: AdminDep, client: ClientDep):
    entry = await record_admin_action(
        session,
        admin,
        body.action_type,
        client,
        details=body.action_details,
        user_id=body.user_id,
        user_email=body.user_email,
        duration_days=body.duration_days,
        notes=body.notes,
    )
    return DataEnvelope(data=ActionLogCreated(log_id=entry.id))


@router.delete(
    "/{log_id}",
    response_model=DataEnvelope[ActionLogCreated],
    summary="Delete Admin Action",
    description="Remove an entry from the admin actions log. Super admins only; the deletion itself is logged.",
    responses=error_responses(401, 403, 404),
)
async def delete_action(log_id: int, session: SessionDep, admin: SuperAdminDep, client: ClientDep):
    repo = AdminActionLogRepository(session)
    entry = await repo.get_by_id(log_id)
    if entry is None:
        raise NotFoundError(f"Log entry {log_id} not found", code="LOG_ENTRY_NOT_FOUND")

    snapshot = {"deleted_log_id": entry.id, "deleted_action_type": entry.action_type}
    await repo.delete(log_id)
    await record_admin_action(session, admin, "log_entry_deleted", client, details=snapshot)
    return DataEnvelope(data=ActionLogCreated(log_id=log_id))
