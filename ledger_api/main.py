import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ledger_api.api.customers import router as customers_router
from ledger_api.api.dashboard import router as dashboard_router
from ledger_api.api.transactions import router as transactions_router
from ledger_api.db.engine import get_engine
from ledger_api.db.schema import metadata

logging.basicConfig(
    level=os.getenv("LEDGER_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    metadata.create_all(get_engine())
    logger.info("Ledger schema ready")
    yield


app = FastAPI(
    title="Customer Ledger API",
    version="0.1.0",
    lifespan=lifespan,
)

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(customers_router)
app.include_router(transactions_router)
app.include_router(dashboard_router)
