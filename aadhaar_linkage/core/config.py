import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./aadhaar_linkage.db")
DB_ECHO      = os.getenv("DB_ECHO", "false").lower() in ("1", "true", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# changing this changes every stored digest
HASH_ENCODING = os.getenv("HASH_ENCODING", "utf-8")

LINKAGE_API_PREFIX = "/api/v1/linkage"

SEED_RECORD_COUNT = int(os.getenv("SEED_RECORD_COUNT", "50"))
