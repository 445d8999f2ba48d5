from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Header, HTTPException, Query
from sqlalchemy.orm import Session

from fleet_service.core.database import get_db_context


def get_db() -> Generator[Session, None, None]:
    with get_db_context() as session:
        yield session


SessionDep = Annotated[Session, Depends(get_db)]

DetailedQuery = Annotated[
    bool,
    Query(description="Return every field instead of the summary projection"),
]


def verify_token(authorization: Annotated[str | None, Header()] = None) -> str:
    """
    Authentication stub: only checks that an ``Authorization`` header is present.

    Mounted on the API router when ``AUTH_ENABLED`` is set.
    """
    if not authorization:
        raise HTTPException(status_code=403, detail="Unauthorized")
    return authorization
