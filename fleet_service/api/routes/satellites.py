import logging

from fastapi import APIRouter, HTTPException

from fleet_service.api.deps import DetailedQuery, SessionDep
from fleet_service.crud import satellites
from fleet_service.models.schemas import (
    SatelliteCreate,
    SatelliteDeleted,
    SatelliteId,
    SatelliteRead,
    SatelliteUpdate,
)

router = APIRouter(prefix="/satellites", tags=["Satellites"])
logger = logging.getLogger(__name__)

NOT_FOUND = "Satellite not found"


def find_satellite_or_404(db: SessionDep, filters: dict, detailed: bool) -> dict:
    satellite = satellites.find_one(db, filters, detailed=detailed)
    if satellite is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return satellite


@router.post(
    "",
    status_code=201,
    response_model=SatelliteRead,
    summary="Create a new satellite",
    description="Create a satellite; 'name' and 'slug' must not be used by another live satellite",
)
def create_satellite(payload: SatelliteCreate, db: SessionDep):
    logger.info(f"Creating satellite {payload.name}")
    return satellites.create(db, payload.model_dump())


@router.get("", summary="List satellites")
def list_satellites(db: SessionDep, detailed: DetailedQuery = False):
    return satellites.find_many(db, detailed=detailed)


@router.get("/id/{satellite_id}", summary="Get a satellite by id")
def get_satellite_by_id(
    satellite_id: str, db: SessionDep, detailed: DetailedQuery = False
):
    return find_satellite_or_404(db, {"id": satellite_id}, detailed)


@router.get("/name/{name}", summary="Get a satellite by name")
def get_satellite_by_name(name: str, db: SessionDep, detailed: DetailedQuery = False):
    return find_satellite_or_404(db, {"name": name}, detailed)


@router.get(
    "/name/{name}/id",
    response_model=SatelliteId,
    summary="Get the id of a satellite by its name",
)
def get_satellite_id_by_name(name: str, db: SessionDep):
    satellite = find_satellite_or_404(db, {"name": name}, detailed=False)
    return {"id": satellite["id"]}


@router.put(
    "/id/{satellite_id}",
    response_model=SatelliteRead,
    summary="Update a satellite by id",
    description="Partial update, 'id', 'name' and 'slug' cannot change",
)
def update_satellite_by_id(satellite_id: str, payload: SatelliteUpdate, db: SessionDep):
    satellite = satellites.update_one(
        db, {"id": satellite_id}, payload.model_dump(exclude_unset=True)
    )
    if satellite is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return satellite


@router.put(
    "/name/{name}",
    response_model=SatelliteRead,
    summary="Update a satellite by name",
    description="Partial update, 'id', 'name' and 'slug' cannot change",
)
def update_satellite_by_name(name: str, payload: SatelliteUpdate, db: SessionDep):
    satellite = satellites.update_one(
        db, {"name": name}, payload.model_dump(exclude_unset=True)
    )
    if satellite is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return satellite


@router.delete(
    "/id/{satellite_id}",
    response_model=SatelliteDeleted,
    summary="Soft delete a satellite by id",
)
def delete_satellite(satellite_id: str, db: SessionDep):
    satellite = satellites.soft_delete(db, {"id": satellite_id})
    if satellite is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return {"message": "Satellite has been soft deleted", "satellite": satellite}
