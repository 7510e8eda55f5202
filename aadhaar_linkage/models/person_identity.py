import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, Index
from aadhaar_linkage.core.database import Base


def generate_linkage_key() -> str:
    return str(uuid.uuid4())


class PersonIdentity(Base):
    __tablename__ = "person_identities"

    aadhaar_linkage_key = Column(String(36), primary_key=True, default=generate_linkage_key)
    hashed_aadhaar_number = Column(String(64), nullable=True)
    hashed_pan_number = Column(String(64), nullable=True)
    hashed_voter_id = Column(String(64), nullable=True)
    hashed_dl_number = Column(String(64), nullable=True)
    hashed_forename = Column(String(64), nullable=True)
    hashed_secondname = Column(String(64), nullable=True)
    hashed_lastname = Column(String(64), nullable=True)
    hashed_dob = Column(String(64), nullable=True)
    hashed_address = Column(String(64), nullable=True)
    gender = Column(String(20), nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc), nullable=False)

    __table_args__ = (
        Index(
            "idx_composite_match",
            "hashed_aadhaar_number", "hashed_dob", "hashed_forename", "hashed_lastname",
        ),
        Index("idx_hashed_pan", "hashed_pan_number"),
    )
