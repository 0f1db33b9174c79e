import logging
import os
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import Session

import service
from auth import get_current_user_id
from db import create_db_and_tables, get_session
from schemas import DeleteResponse, EntryCreate, EntryResponse, EntryUpdate
from store import EntryStore

# Configure logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup."""
    create_db_and_tables()
    logger.info("Database initialized")
    yield


app = FastAPI(title="Remember Her API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_store(session: Session = Depends(get_session)) -> EntryStore:
    return EntryStore(session)


def require_user(user_id: str | None = Depends(get_current_user_id)) -> str:
    """Resolve the caller before anything else runs; 401 if nobody is signed in."""
    if not user_id:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user_id


@app.get("/api/entries", response_model=list[EntryResponse])
def list_entries(
    user_id: str = Depends(require_user),
    store: EntryStore = Depends(get_store),
):
    """List the caller's entries, newest first."""
    logger.info(f"List entries request for user: {user_id}")

    try:
        entries = service.list_entries(store, user_id)
        logger.info(f"Found {len(entries)} entries for user {user_id}")
        return entries
    except Exception as e:
        logger.error(f"Error listing entries: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e)) from e


@app.post("/api/entries", response_model=EntryResponse, status_code=201)
def create_entry(
    payload: EntryCreate | None = None,
    user_id: str = Depends(require_user),
    store: EntryStore = Depends(get_store),
):
    """Create an entry owned by the caller."""
    payload = payload or EntryCreate()
    logger.info(f"Create entry request for user: {user_id} (category: {payload.category})")

    try:
        return service.create_entry(
            store,
            user_id,
            name=payload.name,
            category=payload.category,
            notes=payload.notes,
        )
    except service.EntryValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        store.session.rollback()
        logger.error(f"Error creating entry: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e)) from e


@app.put("/api/entries", response_model=EntryResponse | None)
def update_entry(
    payload: EntryUpdate | None = None,
    user_id: str = Depends(require_user),
    store: EntryStore = Depends(get_store),
):
    """Replace name/notes/category of one of the caller's entries.

    Responds with null when the id doesn't match any entry the caller owns.
    """
    payload = payload or EntryUpdate()
    logger.info(f"Update entry request for ID: {payload.id} (user: {user_id})")

    try:
        return service.update_entry(
            store,
            user_id,
            entry_id=payload.id,
            name=payload.name,
            category=payload.category,
            notes=payload.notes,
        )
    except service.EntryValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        store.session.rollback()
        logger.error(f"Error updating entry: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e)) from e


@app.delete("/api/entries", response_model=DeleteResponse)
def delete_entry(
    id: str | None = Query(None, description="Entry ID"),
    user_id: str = Depends(require_user),
    store: EntryStore = Depends(get_store),
):
    """Delete one of the caller's entries. Succeeds even if nothing matched."""
    logger.info(f"Delete entry request for ID: {id} (user: {user_id})")

    try:
        service.delete_entry(store, user_id, id)
        return DeleteResponse(success=True)
    except service.EntryValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        store.session.rollback()
        logger.error(f"Error deleting entry: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e)) from e


@app.get("/")
def root():
    """Root endpoint."""
    return {"message": "Remember Her API", "docs": "/docs"}
