import logging
from datetime import datetime, timezone

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.database import Database
from pymongo.errors import PyMongoError
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.concurrency import run_in_threadpool

from foodsupply.config.settings import settings
from foodsupply.core.rate_limit import limiter
from foodsupply.core.responses import register_exception_handlers
from foodsupply.database.mongo_client import MongoConnection, get_database
from foodsupply.modules.auth import routes as auth_routes
from foodsupply.modules.auth.service import AuthService
from foodsupply.modules.supplies import routes as supplies_routes
from foodsupply.modules.donations import routes as donations_routes
from foodsupply.modules.volunteers import routes as volunteers_routes

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
register_exception_handlers(app)
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


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
                    (b"X-XSS-Protection", b"1; mode=block"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_routes.router, prefix="/api/v1")
app.include_router(supplies_routes.router, prefix="/api/v1")
app.include_router(donations_routes.router, prefix="/api/v1")
app.include_router(volunteers_routes.router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup, database %s", settings.mongodb_database)
    try:
        # pymongo blocks until server selection times out, keep it off the event loop
        await run_in_threadpool(AuthService(MongoConnection.get_database()).ensure_indexes)
    except PyMongoError as e:
        logger.warning("Could not create users.email index: %s", e)


@app.on_event("shutdown")
async def shutdown_event():
    MongoConnection.close()
    logger.info("Application shutdown")


@app.get("/")
def root():
    return {
        "message": "Server is running smoothly",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/health")
@limiter.exempt
async def health():
    return {"status": "healthy"}


@app.get("/ready")
@limiter.exempt
def ready(db: Database = Depends(get_database)):
    """Readiness probe: succeeds once the document store answers a ping."""
    try:
        db.command("ping")
    except PyMongoError as e:
        logger.warning("Readiness check failed: %s", e)
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return {"status": "ready"}
