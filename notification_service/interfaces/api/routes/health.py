from datetime import datetime

from fastapi import APIRouter, Request

from notification_service.interfaces.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(request: Request) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        service=request.app.state.settings.service_name,
        timestamp=datetime.now(tz=request.app.state.timezone).isoformat(),
    )
