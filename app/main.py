from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.api import bookings
from app.api.client import register_client_routes
from app.api.middleware import RequestLoggingMiddleware
from app.core.logger import setup_logging, logger
from app.services.booking_store import BookingStore
from contextlib import asynccontextmanager
from datetime import datetime

setup_logging()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    app.state.booking_store = BookingStore()
    logger.info(f"🚀 Starting {settings.PROJECT_NAME} ({app.state.environment})")
    yield
    # Shutdown
    logger.info(f"🛑 Shutting down, {len(app.state.booking_store)} bookings discarded")

async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"🔥 UNHANDLED ERROR: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal Server Error"}
    )

def create_app(environment: str = None, client_dist_dir: str = None) -> FastAPI:
    environment = environment or settings.ENVIRONMENT

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        lifespan=lifespan
    )
    app.state.environment = environment
    app.add_exception_handler(Exception, global_exception_handler)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(bookings.router, prefix=settings.API_PREFIX, tags=["Bookings"])

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "environment": environment, "timestamp": datetime.now().isoformat()}

    # The dev client is served by its own dev server
    if environment == "production":
        register_client_routes(app, client_dist_dir or settings.CLIENT_DIST_DIR)

    return app

app = create_app()

if __name__ == "__main__":
    from app.core.server import run_server
    run_server("app.main:app")
