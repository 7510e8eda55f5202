import hashlib
from typing import Optional
from aadhaar_linkage.core.config import HASH_ENCODING


def sha256(value: str) -> str:
    return hashlib.sha256(value.encode(HASH_ENCODING)).hexdigest()


def hash_value(value: Optional[str]) -> Optional[str]:
    # absent stays absent, "" still gets a digest
    if value is None:
        return None
    return sha256(value)
