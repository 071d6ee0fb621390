from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
import store
from errors import register_error_handlers
from routes import health, nominations, results, session

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store.db.init()
    logger.info("Kudos API ready (data file: %s)", store.db.path)
    yield


app = FastAPI(title="Kudos API", version=config.APP_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_origin_regex=config.CORS_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(session.router, prefix="/api")
app.include_router(nominations.router, prefix="/api")
app.include_router(results.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    logger.info("Server running at http://localhost:%d", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)
