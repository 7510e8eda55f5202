import logging
from typing import Optional, Protocol
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from aadhaar_linkage.core.exceptions import LinkageStoreError
from aadhaar_linkage.models.person_identity import PersonIdentity

logger = logging.getLogger(__name__)


class LinkageStore(Protocol):
    """Persistence contract the linkage service depends on.

    Every call is expected to be atomic on its own: ``save`` assigns the
    linkage key on first insert and is an identity write afterwards.
    """

    def save(self, person: PersonIdentity) -> PersonIdentity: ...

    def find_by_id(self, aadhaar_linkage_key: str) -> Optional[PersonIdentity]: ...

    def delete(self, person: PersonIdentity) -> None: ...

    def find_by_composite_key(
        self,
        hashed_aadhaar_number: Optional[str],
        hashed_dob: Optional[str],
        hashed_forename: Optional[str],
        hashed_lastname: Optional[str],
    ) -> Optional[PersonIdentity]: ...


class LinkageRepository:
    """SQLAlchemy-backed linkage store.

    Engine failures roll the session back and surface as ``LinkageStoreError``.
    The error message names the operation and the exception class only; the
    driver text is logged but kept out of the message because it can echo
    bound digest values.
    """

    def __init__(self, db: Session):
        self._db = db

    def save(self, person: PersonIdentity) -> PersonIdentity:
        try:
            self._db.add(person)
            self._db.commit()
            self._db.refresh(person)
            return person
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Failed to save linkage record: {str(e)}", exc_info=True)
            raise LinkageStoreError(f"Failed to save record: {e.__class__.__name__}") from e

    def find_by_id(self, aadhaar_linkage_key: str) -> Optional[PersonIdentity]:
        try:
            return self._db.query(PersonIdentity).filter(
                PersonIdentity.aadhaar_linkage_key == aadhaar_linkage_key
            ).first()
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Failed to load linkage record: {str(e)}", exc_info=True)
            raise LinkageStoreError(f"Failed to load record: {e.__class__.__name__}") from e

    def delete(self, person: PersonIdentity) -> None:
        try:
            self._db.delete(person)
            self._db.commit()
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Failed to delete linkage record: {str(e)}", exc_info=True)
            raise LinkageStoreError(f"Failed to delete record: {e.__class__.__name__}") from e

    def find_by_composite_key(
        self,
        hashed_aadhaar_number: Optional[str],
        hashed_dob: Optional[str],
        hashed_forename: Optional[str],
        hashed_lastname: Optional[str],
    ) -> Optional[PersonIdentity]:
        # None compiles to IS NULL, so an absent digest matches an absent slot
        try:
            return self._db.query(PersonIdentity).filter(
                PersonIdentity.hashed_aadhaar_number == hashed_aadhaar_number,
                PersonIdentity.hashed_dob            == hashed_dob,
                PersonIdentity.hashed_forename       == hashed_forename,
                PersonIdentity.hashed_lastname       == hashed_lastname,
            ).first()
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Composite key lookup failed: {str(e)}", exc_info=True)
            raise LinkageStoreError(f"Failed to search records: {e.__class__.__name__}") from e

    def count(self) -> int:
        try:
            return self._db.query(PersonIdentity).count()
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Failed to count linkage records: {str(e)}", exc_info=True)
            raise LinkageStoreError(f"Failed to count records: {e.__class__.__name__}") from e
