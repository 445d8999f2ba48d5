import logging

from fastapi import APIRouter, HTTPException

from fleet_service.api.deps import DetailedQuery, SessionDep
from fleet_service.crud import beams
from fleet_service.models.schemas import BeamCreate, BeamDeleted, BeamRead, BeamUpdate

router = APIRouter(prefix="/beams", tags=["Beams"])
logger = logging.getLogger(__name__)

NOT_FOUND = "Beam not found"


@router.post(
    "", status_code=201, response_model=BeamRead, summary="Create a new beam"
)
def create_beam(payload: BeamCreate, db: SessionDep):
    logger.info(f"Creating {payload.link_direction} beam {payload.name}")
    return beams.create(db, payload.model_dump())


@router.get("/id/{beam_id}", summary="Get a beam by id")
def get_beam_by_id(beam_id: str, db: SessionDep, detailed: DetailedQuery = False):
    beam = beams.find_one(db, {"id": beam_id}, detailed=detailed)
    if beam is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return beam


@router.put(
    "/id/{beam_id}",
    response_model=BeamRead,
    summary="Update a beam by id",
    description="Partial update, 'id' and 'linkDirection' cannot change",
)
def update_beam_by_id(beam_id: str, payload: BeamUpdate, db: SessionDep):
    beam = beams.update_one(db, {"id": beam_id}, payload.model_dump(exclude_unset=True))
    if beam is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return beam


@router.delete(
    "/id/{beam_id}", response_model=BeamDeleted, summary="Soft delete a beam by id"
)
def delete_beam(beam_id: str, db: SessionDep):
    beam = beams.soft_delete(db, {"id": beam_id})
    if beam is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return {"message": "Beam has been soft deleted", "beam": beam}
