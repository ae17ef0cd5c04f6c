# backend/itq_utils_app/main.py
import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware

from backend.itq_utils_app.core.config import settings
from backend.itq_utils_app.core.logger_config import setup_service_logger
from backend.itq_utils_app.api.deps import build_platform_info_service

from backend.itq_utils_app.api.v1.platform_info import router as platform_info_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):

    # ---------------- Startup ----------------
    setup_service_logger(settings.LOG_DIR, settings.LOG_LEVEL)
    app.state.platform_info = build_platform_info_service(settings)

    logger.info(f"Platform info service ready on channel '{settings.CHANNEL_NAME}'")

    yield

    # ---------------- Shutdown ----------------
    app.state.platform_info = None
    logger.info("Platform info service stopped")

def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_TITLE,
        version=settings.API_VERSION,
        lifespan=lifespan
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    app.include_router(platform_info_router)

    @app.get("/health")
    def health():
        return {
            "status": "ok"
        }

    return app

# This is what TestClient will import
app = create_app()


# Running directly via python -m backend.itq_utils_app.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "backend.itq_utils_app.main:app",
        host=settings.HOST,
        port=settings.PORT,
    )
