import asyncio
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from mandram.config import settings
from mandram.core.rate_limit import limiter
from mandram.database.supabase_client import SupabaseNotConfigured
from mandram.modules.events import routes as events_routes
from mandram.modules.team import routes as team_routes
from mandram.modules.achievements import routes as achievements_routes
from mandram.modules.gallery import routes as gallery_routes
from mandram.modules.kanaiyazhi import routes as kanaiyazhi_routes
from mandram.modules.registrations import routes as registrations_routes
from mandram.modules.keepalive import routes as keepalive_routes
from mandram.modules.sections import routes as sections_routes
from mandram.modules.keepalive.scheduler import keepalive_loop

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.state.keepalive_task = None
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(SupabaseNotConfigured)
async def supabase_not_configured_handler(request: Request, exc: SupabaseNotConfigured):
    logger.error(f"Request to {request.url.path} without Supabase credentials")
    return JSONResponse(status_code=500, content={"error": str(exc)})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    if settings.is_production:
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
    return JSONResponse(status_code=500, content={"error": str(exc)})


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    (b"Referrer-Policy", b"strict-origin-when-cross-origin"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


app.add_middleware(SlowAPIMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include module routes
app.include_router(events_routes.router, prefix="/api")
app.include_router(team_routes.router, prefix="/api")
app.include_router(achievements_routes.router, prefix="/api")
app.include_router(gallery_routes.router, prefix="/api")
app.include_router(kanaiyazhi_routes.router, prefix="/api")
app.include_router(registrations_routes.router, prefix="/api")
app.include_router(keepalive_routes.router, prefix="/api")
app.include_router(sections_routes.router, prefix="/api")


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup")
    if not settings.has_supabase_credentials():
        logger.warning("Supabase URL/key not configured; data endpoints will fail until they are set")
    if settings.keepalive_interval_seconds > 0:
        app.state.keepalive_task = asyncio.create_task(keepalive_loop(settings.keepalive_interval_seconds))
        logger.info(f"Keepalive scheduler started - pinging every {settings.keepalive_interval_seconds}s")


@app.on_event("shutdown")
async def shutdown_event():
    task = app.state.keepalive_task
    if task is not None:
        task.cancel()
        app.state.keepalive_task = None
    logger.info("Application shutdown")


@app.get("/")
async def root():
    return {"message": f"Welcome to {settings.app_name}", "status": "healthy"}


@app.get("/health")
@limiter.exempt
async def health():
    return {"status": "healthy"}


@app.get("/ready")
@limiter.exempt
async def ready():
    """Readiness probe: reports whether Supabase credentials are present."""
    return {"status": "ready", "supabase_configured": settings.has_supabase_credentials()}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, reload=False)
