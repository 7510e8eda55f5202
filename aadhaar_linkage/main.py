import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, HTTPException
from sqlalchemy.orm import Session
from aadhaar_linkage.core.config import LOG_LEVEL
from aadhaar_linkage.core.database import Base, engine, get_db
from aadhaar_linkage.core.exceptions import LinkageStoreError
from aadhaar_linkage.repositories.linkage_repository import LinkageRepository
from aadhaar_linkage.routers.linkage_router import router as linkage_router
import aadhaar_linkage.models.person_identity

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Aadhaar linkage service...")
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Database tables created")

    yield

    logger.info("Aadhaar linkage service stopped")

app = FastAPI(title="Aadhaar Linkage Service", lifespan=lifespan)

app.include_router(linkage_router)


@app.get("/")
def root(db: Session = Depends(get_db)):
    try:
        records = LinkageRepository(db).count()
    except LinkageStoreError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {
        "status": "Aadhaar Linkage API is running",
        "records": records,
    }
