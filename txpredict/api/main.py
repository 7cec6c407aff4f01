import logging

from fastapi import FastAPI
from contextlib import asynccontextmanager
from txpredict.config import settings
from txpredict.db.base import init_db
from txpredict.api.routes import router

logging.basicConfig(level=settings.log_level, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")

@asynccontextmanager
async def lifespan(app: FastAPI):
    # /history and /summary read the table even with JOURNAL=0
    init_db()
    yield

app = FastAPI(title="TaiXiu Ensemble Predictor", lifespan=lifespan)
app.include_router(router)

@app.get("/")
def home():
    return {"ok": True, "app": "TaiXiu Ensemble Predictor"}
