import random
import string
from typing import List
from faker import Faker
from sqlalchemy.orm import Session
from aadhaar_linkage.core.config import SEED_RECORD_COUNT
from aadhaar_linkage.core.database import SessionLocal, Base, engine
from aadhaar_linkage.repositories.linkage_repository import LinkageRepository
from aadhaar_linkage.schemas.linkage_schema import LinkageRequest, ResponseStatus
from aadhaar_linkage.services.linkage_service import LinkageService

MIN_AGE = 18
MAX_AGE = 60

STATE_CODES = ["AP", "TS", "KA", "TN", "MH", "DL"]

fake = Faker("en_IN")


def generate_aadhaar(existing_aadhaars: set) -> str:
    while True:
        # UIDAI numbers never start with 0 or 1
        aadhaar = random.choice("23456789") + "".join(random.choices(string.digits, k=11))
        if aadhaar not in existing_aadhaars:
            existing_aadhaars.add(aadhaar)
            return aadhaar


def generate_pan() -> str:
    letters = string.ascii_uppercase
    first_three = "".join(random.choices(letters, k=3))
    fourth = "P"  # individual holder
    fifth = random.choice(letters)
    digits = "".join(random.choices(string.digits, k=4))
    check = random.choice(letters)
    return f"{first_three}{fourth}{fifth}{digits}{check}"


def generate_voter_id() -> str:
    return "".join(random.choices(string.ascii_uppercase, k=3)) + "".join(random.choices(string.digits, k=7))


def generate_dl_number() -> str:
    state = random.choice(STATE_CODES)
    rto = f"{random.randint(1, 99):02d}"
    year = str(random.randint(1990, 2024))
    serial = "".join(random.choices(string.digits, k=7))
    return f"{state}{rto}{year}{serial}"


def fake_identity(existing_aadhaars: set) -> dict:
    gender = random.choice(["Male", "Female"])
    forename = fake.first_name_male() if gender == "Male" else fake.first_name_female()
    return {
        "aadhaar_number": generate_aadhaar(existing_aadhaars),
        "pan_number":     generate_pan(),
        "voter_id":       generate_voter_id(),
        "dl_number":      generate_dl_number(),
        "forename":       forename,
        "secondname":     random.choice([None, fake.first_name()]),
        "lastname":       fake.last_name(),
        "dob":            fake.date_of_birth(minimum_age=MIN_AGE, maximum_age=MAX_AGE).isoformat(),
        "address":        fake.address().replace("\n", ", "),
        "gender":         gender,
    }


def seed(db: Session, count: int = SEED_RECORD_COUNT) -> List[str]:
    service = LinkageService(LinkageRepository(db))
    existing_aadhaars = set()
    keys = []
    for _ in range(count):
        result = service.process_request(
            LinkageRequest(action="INSERT", data=fake_identity(existing_aadhaars))
        )
        if result.status != ResponseStatus.SUCCESS:
            raise RuntimeError(f"Seeding failed: {result.message}")
        keys.append(result.data.aadhaar_linkage_key)
    return keys


if __name__ == "__main__":
    random.seed(42)
    Faker.seed(42)
    Base.metadata.create_all(bind=engine, checkfirst=True)
    db = SessionLocal()
    try:
        keys = seed(db)
        print(f"Inserted {len(keys)} synthetic linkage records.")
    finally:
        db.close()
