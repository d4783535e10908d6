"""
FastAPI backend: REST API over the contact file.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from phonebook.application import ContactStore, CorruptFile, Saved
from phonebook.domain import Contact, PhoneNumber
from phonebook.infrastructure import load_store

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "db.bin"


def _db_path() -> str:
    return os.environ.get("PHONEBOOK_DB_PATH", DEFAULT_DB_PATH).strip() or DEFAULT_DB_PATH


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.store = None
    app.state.load_error = None
    db_path = _db_path()
    try:
        app.state.store = load_store(db_path)
        logger.info("Database %s was successfully read", app.state.store.path)
    except CorruptFile as e:
        app.state.load_error = str(e)
        logger.warning("Error reading database file %s", db_path)
    yield


app = FastAPI(title="Phonebook API", lifespan=lifespan)


def get_store(request: Request) -> ContactStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        detail = getattr(request.app.state, "load_error", None) or "Contact store not loaded"
        raise HTTPException(status_code=503, detail=detail)
    return store


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contacts ---


class NumberItem(BaseModel):
    kind: str = ""
    digits: str = ""


class ContactItem(BaseModel):
    full_name: str = ""
    numbers: list[NumberItem] = []


def _to_item(contact: Contact) -> ContactItem:
    return ContactItem(
        full_name=contact.full_name,
        numbers=[NumberItem(kind=n.kind, digits=n.digits) for n in contact.numbers],
    )


@app.post("/contacts")
def create_contact(body: ContactItem, request: Request):
    store = get_store(request)
    contact = Contact(
        full_name=body.full_name,
        numbers=[PhoneNumber(kind=n.kind, digits=n.digits) for n in body.numbers],
    )
    if not store.add_contact(contact):
        logger.warning("Invalid character input in numbers of new contact")
        raise HTTPException(
            status_code=400,
            detail="Some numbers contain letters or have no digits.",
        )
    result = store.save()
    if not isinstance(result, Saved):
        logger.warning("Contact kept in memory only: %s", result.reason)
    return JSONResponse(
        content={
            "contact": _to_item(contact).model_dump(),
            "saved": isinstance(result, Saved),
        },
        status_code=201,
    )


@app.get("/contacts")
def list_contacts(request: Request):
    store = get_store(request)
    return [_to_item(c) for c in store.list()]


@app.get("/contacts/search")
def search_contacts(request: Request, q: str = ""):
    store = get_store(request)
    contacts = store.search(q) if q else store.list()
    return [_to_item(c) for c in contacts]


@app.get("/contacts/text", response_class=PlainTextResponse)
def contacts_text(request: Request, q: str = ""):
    store = get_store(request)
    if q:
        return store.render_search(q)
    return store.render_all()
