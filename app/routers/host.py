# app/routers/host.py
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.core.auth import require_host
from app.schemas.host import HostSummary
from app.services.host_service import HostService
from app.stores import RegistryStore, get_store

router = APIRouter(
    prefix="/host",
    tags=["Host"],
    dependencies=[Depends(require_host)],
)

service = HostService()


@router.get("/summary", response_model=HostSummary)
def get_summary(store: RegistryStore = Depends(get_store)):
    """
    Who is bringing what, plus headline stats.

    Only accessible to users with role='host'.
    """
    return service.summary(store)


@router.get("/summary.csv", response_class=PlainTextResponse)
def download_summary(store: RegistryStore = Depends(get_store)):
    """
    Same table as /host/summary, as a CSV download.
    """
    return PlainTextResponse(
        service.summary_csv(store),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="gift-list.csv"'},
    )
