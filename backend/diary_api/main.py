"""
Travel Diary Backend - FastAPI Application

A personal diary API: users register, log in, and keep dated entries
about the places they visit.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from diary_api.config import get_settings
from diary_api.core.exceptions import StorageError
from diary_api.core.security import get_password_hasher, get_token_codec
from diary_api.database.connections import get_mongo_client, close_connections
from diary_api.database.registry import sync_registry, create_indexes
from diary_api.routers import auth, entries, health

# Settings are loaded at import: a missing or malformed JWT secret stops the process here
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("diary_api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Build the password hasher and token codec (fatal on bad config)
    - Create indexes
    - Sync database registry

    Shutdown:
    - Close the database connection
    """
    logger.info("Starting up Travel Diary Backend...")

    get_password_hasher()
    get_token_codec()

    try:
        client = await get_mongo_client()
        await create_indexes(client)
        await sync_registry(client)
        logger.info("Indexes created and database registry synced")
    except Exception as e:
        logger.warning("Database initialization warning: %s", e)

    yield

    logger.info("Shutting down Travel Diary Backend...")
    await close_connections()
    logger.info("Database connection closed")


app = FastAPI(
    title="Travel Diary API",
    description="""
## Travel Diary API

Keep a private diary of the places you visit.

### Features
- **Accounts**: Register with username, password and email
- **Authentication**: JWT bearer tokens issued on login
- **Entries**: Create, read, update and delete your own diary entries

### Authentication
All protected endpoints require the token from `POST /login/` in the
`Authorization` header:
```
Authorization: Bearer your_jwt_token
```
    """,
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    """Report database failures as an opaque 500."""
    logger.error("Storage failure on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.detail},
    )


# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(entries.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Travel Diary API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
