import logging

from fastapi import APIRouter, HTTPException

from fleet_service.api.deps import DetailedQuery, SessionDep
from fleet_service.crud import transponders
from fleet_service.models.schemas import (
    TransponderCreate,
    TransponderDeleted,
    TransponderRead,
    TransponderUpdate,
)

router = APIRouter(prefix="/transponders", tags=["Transponders"])
logger = logging.getLogger(__name__)

NOT_FOUND = "Transponder not found"


@router.post(
    "",
    status_code=201,
    response_model=TransponderRead,
    summary="Create a new transponder",
)
def create_transponder(payload: TransponderCreate, db: SessionDep):
    logger.info(f"Creating transponder {payload.name}")
    return transponders.create(db, payload.model_dump())


@router.get("/id/{transponder_id}", summary="Get a transponder by id")
def get_transponder_by_id(
    transponder_id: str, db: SessionDep, detailed: DetailedQuery = False
):
    transponder = transponders.find_one(db, {"id": transponder_id}, detailed=detailed)
    if transponder is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return transponder


@router.put(
    "/id/{transponder_id}",
    response_model=TransponderRead,
    summary="Update a transponder by id",
    description="Partial update, 'id', 'name' and both polarizations cannot change",
)
def update_transponder_by_id(
    transponder_id: str, payload: TransponderUpdate, db: SessionDep
):
    transponder = transponders.update_one(
        db, {"id": transponder_id}, payload.model_dump(exclude_unset=True)
    )
    if transponder is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return transponder


@router.delete(
    "/id/{transponder_id}",
    response_model=TransponderDeleted,
    summary="Soft delete a transponder by id",
)
def delete_transponder(transponder_id: str, db: SessionDep):
    transponder = transponders.soft_delete(db, {"id": transponder_id})
    if transponder is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return {"message": "Transponder has been soft deleted", "transponder": transponder}
