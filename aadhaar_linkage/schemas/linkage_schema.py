from datetime import datetime
from enum import Enum
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ActionType(str, Enum):
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    SEARCH = "SEARCH"


def normalize_action(action: Optional[str]) -> Optional[ActionType]:
    if action is None:
        return None
    try:
        return ActionType(action.strip().upper())
    except ValueError:
        return None


class ResponseStatus(str, Enum):
    SUCCESS   = "SUCCESS"
    ERROR     = "ERROR"
    NOT_FOUND = "NOT_FOUND"


class LinkageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    action: Optional[str] = None
    old_aadhaar_linkage_key: Optional[str] = Field(None, alias="oldAadhaarLinkageKey")
    data: Optional[Dict[str, Optional[str]]] = None

    @field_validator("data", mode="before")
    @classmethod
    def stringify_numbers(cls, v):
        # clients often send Aadhaar and other ids as JSON numbers
        if not isinstance(v, dict):
            return v
        return {
            key: str(value) if isinstance(value, (int, float)) and not isinstance(value, bool) else value
            for key, value in v.items()
        }


class PersonIdentityRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    aadhaar_linkage_key: str
    hashed_aadhaar_number: Optional[str] = None
    hashed_pan_number: Optional[str] = None
    hashed_voter_id: Optional[str] = None
    hashed_dl_number: Optional[str] = None
    hashed_forename: Optional[str] = None
    hashed_secondname: Optional[str] = None
    hashed_lastname: Optional[str] = None
    hashed_dob: Optional[str] = None
    hashed_address: Optional[str] = None
    gender: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LinkageResponse(BaseModel):
    status: ResponseStatus
    message: str
    data: Optional[PersonIdentityRecord] = None

    @classmethod
    def success(cls, message: str, record=None) -> "LinkageResponse":
        payload = PersonIdentityRecord.model_validate(record) if record is not None else None
        return cls(status=ResponseStatus.SUCCESS, message=message, data=payload)

    @classmethod
    def error(cls, message: str) -> "LinkageResponse":
        return cls(status=ResponseStatus.ERROR, message=message)

    @classmethod
    def not_found(cls, message: str) -> "LinkageResponse":
        return cls(status=ResponseStatus.NOT_FOUND, message=message)
