from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from routers.rooms import rooms_router
from relay import RoomRelay
from constants import REDIS_URL, REDIS_TOKEN, IO_PREFIX, LOG_LEVEL, LOG_FILE
from logging_config import get_logger, setup_logging

# Setup logging
setup_logging(log_level=LOG_LEVEL, log_file=LOG_FILE)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One relay for the whole process; routes use emit_to so it can be shared
    app.state.relay = RoomRelay(REDIS_URL, REDIS_TOKEN, prefix=IO_PREFIX)
    logger.info(f"Room relay ready with prefix '{IO_PREFIX}'")
    try:
        yield
    finally:
        await app.state.relay.close()


app = FastAPI(lifespan=lifespan)

# Configure CORS to allow all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins
    allow_credentials=True,
    allow_methods=["*"],  # Allow all HTTP methods
    allow_headers=["*"],  # Allow all headers
)

app.include_router(rooms_router)

logger.info("FastAPI application initialized")
