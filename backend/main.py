from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from api import deliveries
from config.app_config import settings
from constants import HeaderNames, ServerConfig
from init_db import init_database
from schemas import HealthStatus
from utils.logging_utils import RequestContextMiddleware, configure_logging
import logging
import sys

LOG_FILE = configure_logging(settings.log_dir, settings.log_level)

logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {LOG_FILE}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: make sure the schema exists before serving."""
    init_database()
    logger.info(f"🚀 {ServerConfig.SERVICE_NAME} ready (application name: {settings.application_name})")
    yield
    logger.info(f"{ServerConfig.SERVICE_NAME} shutting down")


app = FastAPI(
    title=ServerConfig.SERVICE_NAME,
    version=ServerConfig.VERSION,
    lifespan=lifespan,
)

# Alert and pagination headers must be readable by browser clients
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[
        HeaderNames.alert(settings.application_name),
        HeaderNames.error(settings.application_name),
        HeaderNames.params(settings.application_name),
        HeaderNames.TOTAL_COUNT,
        HeaderNames.LINK,
        HeaderNames.LOCATION,
        HeaderNames.REQUEST_ID,
    ],
)
app.add_middleware(RequestContextMiddleware)

app.include_router(deliveries.router, prefix=ServerConfig.API_PREFIX, tags=["deliveries"])


@app.get("/api/health", response_model=HealthStatus)
def health_check():
    """Health check endpoint"""
    return HealthStatus(
        status="ok",
        service=ServerConfig.SERVICE_NAME,
        version=ServerConfig.VERSION,
    )


if __name__ == "__main__":
    import uvicorn
    import socket

    # Check if port is available
    def is_port_in_use(host: str, port: int) -> bool:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            try:
                s.bind((host, port))
                return False
            except OSError:
                return True

    if is_port_in_use(settings.server_host, settings.server_port):
        logger.error(f"❌ Port {settings.server_port} is already in use!")
        logger.error(f"   To fix: set SERVER_PORT or stop the process holding the port")
        sys.exit(1)

    logger.info(f"🚀 Starting {ServerConfig.SERVICE_NAME} on http://{settings.server_host}:{settings.server_port}...")
    uvicorn.run(app, host=settings.server_host, port=settings.server_port)
