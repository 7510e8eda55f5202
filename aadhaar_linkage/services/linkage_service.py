import logging
from typing import Dict, List, Optional
from aadhaar_linkage.core.exceptions import LinkageStoreError
from aadhaar_linkage.models.person_identity import PersonIdentity
from aadhaar_linkage.repositories.linkage_repository import LinkageStore
from aadhaar_linkage.schemas.linkage_schema import ActionType, LinkageRequest, LinkageResponse, normalize_action
from aadhaar_linkage.utils.hash_util import hash_value

logger = logging.getLogger(__name__)

# request field -> digest column
HASHED_FIELDS = {
    "aadhaar_number": "hashed_aadhaar_number",
    "pan_number":     "hashed_pan_number",
    "voter_id":       "hashed_voter_id",
    "dl_number":      "hashed_dl_number",
    "forename":       "hashed_forename",
    "secondname":     "hashed_secondname",
    "lastname":       "hashed_lastname",
    "dob":            "hashed_dob",
    "address":        "hashed_address",
}
PLAIN_FIELDS = ("gender",)


class LinkageService:
    """Dispatches INSERT / UPDATE / DELETE / SEARCH requests against a linkage store.

    Sensitive values are hashed before they reach the store; only ``gender`` is
    kept as plaintext. Every path returns a ``LinkageResponse``, store faults
    included.
    """

    def __init__(self, store: LinkageStore):
        self._store = store

    def process_request(self, request: Optional[LinkageRequest]) -> LinkageResponse:
        if request is None or request.action is None:
            return LinkageResponse.error("Invalid request")

        handlers = {
            ActionType.INSERT: self._insert_record,
            ActionType.UPDATE: self._update_record,
            ActionType.DELETE: self._delete_record,
            ActionType.SEARCH: self._search_record,
        }
        handler = handlers.get(normalize_action(request.action))
        if handler is None:
            logger.warning(f"Rejected unknown action {request.action!r}")
            return LinkageResponse.error(f"Invalid action type: {request.action}")

        try:
            return handler(request)
        except LinkageStoreError as e:
            return LinkageResponse.error(str(e))

    def _insert_record(self, request: LinkageRequest) -> LinkageResponse:
        data = request.data
        if data is None:
            return LinkageResponse.error("Missing data")

        person = PersonIdentity()
        for field, column in HASHED_FIELDS.items():
            setattr(person, column, hash_value(data.get(field)))
        person.gender = data.get("gender")

        person = self._store.save(person)
        logger.info(f"Inserted linkage record {person.aadhaar_linkage_key}")
        return LinkageResponse.success("Record inserted successfully", person)

    def _update_record(self, request: LinkageRequest) -> LinkageResponse:
        old_key = request.old_aadhaar_linkage_key
        if old_key is None:
            return LinkageResponse.error("oldAadhaarLinkageKey required")

        person = self._store.find_by_id(old_key)
        if person is None:
            return LinkageResponse.not_found("Record not found")

        applied = self._apply_patch(person, request.data or {})
        person = self._store.save(person)
        logger.info(f"Updated linkage record {old_key}: {applied}")
        return LinkageResponse.success("Record updated successfully", person)

    def _delete_record(self, request: LinkageRequest) -> LinkageResponse:
        old_key = request.old_aadhaar_linkage_key
        if old_key is None:
            return LinkageResponse.error("oldAadhaarLinkageKey required")

        person = self._store.find_by_id(old_key)
        if person is None:
            return LinkageResponse.not_found("Record not found")

        self._store.delete(person)
        logger.info(f"Deleted linkage record {old_key}")
        return LinkageResponse.success("Record deleted successfully")

    def _search_record(self, request: LinkageRequest) -> LinkageResponse:
        data = request.data
        if data is None:
            return LinkageResponse.error("Missing data for search")

        person = self._store.find_by_composite_key(
            hash_value(data.get("aadhaar_number")),
            hash_value(data.get("dob")),
            hash_value(data.get("forename")),
            hash_value(data.get("lastname")),
        )
        if person is None:
            return LinkageResponse.not_found("No record found")
        return LinkageResponse.success("Record found", person)

    @staticmethod
    def _apply_patch(person: PersonIdentity, data: Dict[str, Optional[str]]) -> List[str]:
        # only keys present in the mapping are touched, missing keys keep their digest
        applied = []
        for field, column in HASHED_FIELDS.items():
            if field in data:
                setattr(person, column, hash_value(data[field]))
                applied.append(field)
        for field in PLAIN_FIELDS:
            if field in data:
                setattr(person, field, data[field])
                applied.append(field)
        return applied
