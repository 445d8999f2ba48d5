from fastapi import APIRouter, Depends

from fleet_service.api.deps import verify_token
from fleet_service.api.routes import beams, satellites, transponders
from fleet_service.core.config import config


def create_api_router(auth_enabled: bool = config.AUTH_ENABLED) -> APIRouter:
    router = APIRouter(
        prefix="/api",
        dependencies=[Depends(verify_token)] if auth_enabled else [],
    )
    router.include_router(satellites.router)
    router.include_router(beams.router)
    router.include_router(transponders.router)
    return router


api_router = create_api_router()
