import logging
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session
from aadhaar_linkage.core.config import LINKAGE_API_PREFIX
from aadhaar_linkage.core.database import get_db
from aadhaar_linkage.core.exceptions import LinkageStoreError
from aadhaar_linkage.repositories.linkage_repository import LinkageRepository
from aadhaar_linkage.schemas.linkage_schema import (
    ActionType, LinkageRequest, LinkageResponse, PersonIdentityRecord, ResponseStatus, normalize_action,
)
from aadhaar_linkage.services.linkage_service import LinkageService

logger = logging.getLogger(__name__)

router = APIRouter(prefix=LINKAGE_API_PREFIX, tags=["Aadhaar Linkage"])

STATUS_CODES = {
    ResponseStatus.SUCCESS:   200,
    ResponseStatus.NOT_FOUND: 404,
    ResponseStatus.ERROR:     400,
}


@router.post("/process", response_model=LinkageResponse)
def process_linkage_request(
    request: LinkageRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    try:
        result = LinkageService(LinkageRepository(db)).process_request(request)
    except Exception as e:
        logger.error(f"Linkage request error: {str(e)}", exc_info=True)
        response.status_code = 500
        return LinkageResponse.error("Linkage service temporarily unavailable")

    response.status_code = STATUS_CODES[result.status]
    if (result.status == ResponseStatus.SUCCESS
            and normalize_action(request.action) == ActionType.INSERT):
        response.status_code = 201
    return result


@router.get("/{aadhaar_linkage_key}", response_model=PersonIdentityRecord)
def get_linkage_record(aadhaar_linkage_key: str, db: Session = Depends(get_db)):
    try:
        person = LinkageRepository(db).find_by_id(aadhaar_linkage_key)
    except LinkageStoreError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if not person:
        raise HTTPException(404, f"Record {aadhaar_linkage_key} not found")
    return person
