import asyncio
import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from admin_panel.dependencies.panel import get_auth_cache, get_settings
from admin_panel.panel import get_admin_panel

logger = logging.getLogger(__name__)

load_dotenv()


@asynccontextmanager
async def _lifespan(_app: FastAPI):
    panel = get_admin_panel()
    if panel.auth_cache is None:
        panel.set_authorization_cache(get_auth_cache())
    logger.info(
        f"Admin panel ready: main menu {'registered' if panel.has_main_menu() else 'not registered'}, "
        f"{len(panel.dashboard_registry)} dashboard(s)"
    )

    try:
        yield
    except asyncio.CancelledError:
        logger.info("Application shutdown requested (CancelledError). Exiting gracefully.")
    except Exception:
        logger.exception("Unhandled exception during application lifespan shutdown.")
        raise


settings = get_settings()

tags_metadata = [
    {"name": "Menu", "description": "Main menu resolved for the calling principal."},
    {"name": "Dashboards", "description": "Registered dashboards and their cards."},
    {"name": "Health", "description": "Health, readiness and liveness checks."},
]

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    openapi_tags=tags_metadata,
    swagger_ui_parameters={"displayRequestDuration": True, "persistAuthorization": True},
    lifespan=_lifespan,
)


@app.get("/", include_in_schema=False)
async def root():
    return {"message": settings.app_name}


# Set up GZip compression middleware (BEFORE CORS)
app.add_middleware(
    GZipMiddleware,
    minimum_size=1000,  # Only compress responses > 1KB
    compresslevel=6,
)

logger.info(f"CORS enabled for origins: {settings.cors_origin_list}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# include routers
from .routers import dashboards, health, menu  # noqa: E402

app.include_router(dashboards.router)
app.include_router(health.router)
app.include_router(menu.router)


__all__ = ["app"]
