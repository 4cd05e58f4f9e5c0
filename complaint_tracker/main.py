import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

load_dotenv(Path(__file__).resolve().parents[1] / ".env")

import complaint_tracker.config.config as configs
from complaint_tracker.api.v1.route import api_router as MainRouter
from complaint_tracker.db.session import Base, engine
from complaint_tracker.db import models  # noqa: F401

logging.basicConfig(level=configs.LOG_LEVEL, format=configs.LOG_FORMAT)
logger = logging.getLogger(__name__)

app = FastAPI(title=configs.APP_TITLE, version=configs.APP_VERSION)
app.include_router(router=MainRouter, prefix=configs.API_PREFIX)


@app.on_event("startup")
def create_tables() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("complaint tables ready on %s", engine.url.render_as_string(hide_password=True))
