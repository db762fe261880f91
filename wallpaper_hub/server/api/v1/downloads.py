"""
Download Token Endpoints.

Issue a download token for a wallpaper, redeem it for a time-limited asset
URL, and purge expired tokens.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Request

from wallpaper_hub.core.models.io.downloads import DownloadRequest, DownloadTicket, SignedDownload
from wallpaper_hub.core.models.io.envelope import DataEnvelope, DeletedCount, error_responses
from wallpaper_hub.server.core.config import settings
from wallpaper_hub.server.exceptions import BadRequestError
from wallpaper_hub.server.services.deps import AdminDep, ClientDep, SessionDep, StorageDep, ViewerDep
from wallpaper_hub.server.services.download_broker import DownloadBroker

router = APIRouter(tags=["downloads"])


def get_download_broker(session: SessionDep, storage: StorageDep) -> DownloadBroker:
    return DownloadBroker(session, storage, settings.downloads)


BrokerDep = Annotated[DownloadBroker, Depends(get_download_broker)]


@router.post(
    "/download-wallpaper",
    response_model=DataEnvelope[DownloadTicket],
    summary="Request Download Token",
    description="Check access to a wallpaper at a resolution and issue a single-use download token.",
    responses=error_responses(400, 403, 404),
)
async def request_download(
    body: DownloadRequest,
    request: Request,
    broker: BrokerDep,
    viewer: ViewerDep,
    client: ClientDep,
):
    """
    Issue a download token.

    - **wallpaper_id**: wallpaper to download.
    - **resolution**: `1080p` (default), `4k`, `8k` or `video`. `4k` and `8k` need an active premium plan.

    The response carries the countdown the client must show before redeeming
    the token (0 for premium viewers) and the redemption URL.
    """
    ticket = await broker.issue(body, viewer, client)
    ticket.download_url = str(request.url_for("download_file").include_query_params(token=ticket.token))
    return DataEnvelope(data=ticket)


@router.get(
    "/download-file",
    name="download_file",
    response_model=DataEnvelope[SignedDownload],
    summary="Redeem Download Token",
    description="Consume a download token and return a time-limited URL for the asset.",
    responses=error_responses(400, 404, 410, 429),
)
async def redeem_download(broker: BrokerDep, token: Optional[str] = Query(default=None)):
    """
    Redeem a download token.

    Tokens are single use. Redeeming before the countdown has elapsed answers
    `429 TIMER_NOT_COMPLETED` with `remaining_time`, `required_time` and
    `elapsed_time`; the token stays valid until it expires.
    """
    if not token or not token.strip():
        raise BadRequestError("Download token is required")
    return DataEnvelope(data=await broker.redeem(token.strip()))


@router.delete(
    "/admin/download-sessions/expired",
    response_model=DataEnvelope[DeletedCount],
    summary="Purge Expired Download Tokens",
    description="Delete download sessions that expired more than an hour ago.",
    responses=error_responses(401, 403),
)
async def purge_expired_sessions(broker: BrokerDep, admin: AdminDep):
    return DataEnvelope(data=DeletedCount(deleted=await broker.purge_expired()))
