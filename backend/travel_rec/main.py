import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.routing import APIRoute
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from travel_rec.config import settings
from travel_rec.errors import UpstreamAPIError

# ─── Logging setup (file + console) ───
_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_LOG_DIR.mkdir(exist_ok=True)

_log_level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            _LOG_DIR / "travel_rec.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from travel_rec.routers import amadeus, booking, mock, places, recommendations, subscriptions  # noqa: E402
from travel_rec.services.amadeus_client import amadeus_client  # noqa: E402
from travel_rec.services.cache_service import cache_service  # noqa: E402
from travel_rec.services.places_client import places_client  # noqa: E402
from travel_rec.services.subscription_service import subscription_service  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting travel_rec ({settings.app_env}) on port {settings.port}")
    logger.info(
        "Amadeus credentials %s, Google Places key %s, Stripe key %s",
        "set" if settings.amadeus_api_key and settings.amadeus_api_secret else "NOT SET",
        "set" if settings.google_places_api_key else "NOT SET",
        "set" if settings.stripe_secret_key else "NOT SET",
    )

    # Create tables and seed sample destinations if the DB is empty (dev convenience)
    if settings.seed_on_startup:
        try:
            from travel_rec.database import init_models
            from travel_rec.seed import seed

            await init_models()
            await seed()
        except Exception as e:
            logger.warning(f"Auto-seed skipped: {e}")

    yield

    await amadeus_client.close()
    await places_client.close()
    await subscription_service.close()
    await cache_service.close()
    logger.info("Upstream clients closed")


app = FastAPI(
    title="Travel Recommendation API",
    description="Destination recommendations and travel search proxy",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.exception_handler(UpstreamAPIError)
async def upstream_error_handler(request: Request, exc: UpstreamAPIError):
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={
            "message": "Server error",
            "error": str(exc) if settings.is_development else "An error occurred",
        },
    )


app.include_router(recommendations.router, prefix="/api/recommendations", tags=["recommendations"])
app.include_router(amadeus.router, prefix="/api/external/amadeus", tags=["amadeus"])
app.include_router(booking.router, prefix="/api/external/booking", tags=["booking"])
app.include_router(places.router, prefix="/api/external/places", tags=["places"])
app.include_router(mock.router, prefix="/api/mock", tags=["mock"])
app.include_router(subscriptions.router, prefix="/api/subscriptions", tags=["subscriptions"])


@app.get("/api/health")
async def health_check():
    return {
        "status": "OK",
        "environment": settings.app_env,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/api/debug")
async def debug_info():
    """Registered routes and which upstream credentials are configured (never their values)."""
    routes = [
        {"methods": sorted(r.methods), "path": r.path}
        for r in app.routes
        if isinstance(r, APIRoute)
    ]
    return {
        "server_status": "running",
        "port": settings.port,
        "routes": routes,
        "current_time": datetime.now(timezone.utc).isoformat(),
        "environment": {
            "app_env": settings.app_env,
            "amadeus_api_key_set": bool(settings.amadeus_api_key),
            "amadeus_api_secret_set": bool(settings.amadeus_api_secret),
            "google_places_api_key_set": bool(settings.google_places_api_key),
            "stripe_secret_key_set": bool(settings.stripe_secret_key),
            "database_url_set": bool(settings.database_url),
        },
    }


def mount_client(target: FastAPI, build_dir: Path) -> None:
    """Serve the built client from ``build_dir``; unknown paths get index.html."""
    root = build_dir.resolve()
    static_dir = root / "static"
    if static_dir.is_dir():
        target.mount("/static", StaticFiles(directory=str(static_dir)), name="static-assets")

    @target.get("/{full_path:path}", include_in_schema=False)
    async def serve_spa(full_path: str):
        file_path = (root / full_path).resolve()
        # Encoded ".." segments must not escape the build directory
        if file_path.is_relative_to(root) and file_path.is_file():
            return FileResponse(str(file_path))
        return FileResponse(str(root / "index.html"))


_client_build = Path(__file__).resolve().parent.parent.parent / "client" / "build"
if not settings.is_development and _client_build.is_dir():
    mount_client(app, _client_build)


def run():
    """Console entry point: serve the app on ``PORT``."""
    import uvicorn

    uvicorn.run("travel_rec.main:app", host="0.0.0.0", port=settings.port)
