# notes_api/main.py

import logging

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIMiddleware

from notes_api.common.config import settings
from notes_api.common.database.database import async_session, close_db_connection, connect_to_db
from notes_api.common.exception_handlers import setup_exception_handlers
from notes_api.common.rate_limit import limiter
from notes_api.modules.notes.note_controller import router as notes_router
from notes_api.modules.notes.note_repository import SqlAlchemyNoteRepository
from notes_api.modules.notes.note_service import NoteService
from notes_api.modules.users.user_repository import SqlAlchemyUserRepository

# Centralized logging configuration
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

# Lifespan context manager for startup and shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    await connect_to_db()
    app.state.note_service = NoteService(
        notes=SqlAlchemyNoteRepository(async_session),
        users=SqlAlchemyUserRepository(async_session),
    )
    yield
    await close_db_connection()

# Initialize FastAPI app with lifespan manager
app = FastAPI(
    title="Notes API",
    description="Notes owned by users, with a rate-limited login gate.",
    version="1.0.0",
    lifespan=lifespan
)

# Rate limiting and error responses
app.state.limiter = limiter
setup_exception_handlers(app)
app.add_middleware(SlowAPIMiddleware)

# Middleware for CORS using allowed origins from settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(notes_router)

# Health check endpoint
@app.get("/health", tags=["Health"])
@limiter.exempt
async def health_check():
    return {"status": "ok", "message": "API is running"}
