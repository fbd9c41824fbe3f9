from fastapi import APIRouter

from lingocards.dependencies import DatabaseDep, SettingsDep
from lingocards.schemas.api.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/ping", response_model=HealthResponse)
def ping(database: DatabaseDep, settings: SettingsDep):
    """Health check: API up, database reachable, webhook configured or not."""
    database_ok = database.health_check()
    return HealthResponse(
        status="ok" if database_ok else "degraded",
        version=settings.app_version,
        services={
            "database": "healthy" if database_ok else "unreachable",
            "analysis_webhook": "configured" if settings.webhook_url else "disabled",
        },
    )
