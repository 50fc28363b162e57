from datetime import datetime, timezone

from fastapi import APIRouter

from product_catalog.entrypoints.http.dtos.health import HealthResponseDTO

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponseDTO, summary="Liveness check")
def health() -> HealthResponseDTO:
    return HealthResponseDTO(status="ok", timestamp=datetime.now(timezone.utc))
