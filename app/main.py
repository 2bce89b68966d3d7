import logging

from fastapi import FastAPI

from app.api.contributors import router as contributors_router
from app.config import LOG_LEVEL
from app.pages.tips import router as tips_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(message)s",
)

app = FastAPI(
    title="BBQ Tips API",
    version="0.1.0",
)

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(contributors_router)
app.include_router(tips_router)
