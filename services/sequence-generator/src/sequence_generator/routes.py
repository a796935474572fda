"""
API routes for the sequence generator service.
"""

import logging
import uuid

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from cpg_hmm.params import ModelParameters, gc_content, nucleotide_string
from sequence_generator.data import generate_sequence, to_records

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_LENGTH = 100_000
MAX_SEED = 2**32 - 1
MAX_SESSIONS = 64

# In-memory session store: session_id -> {sequence, cursor, length}.
# Insertion order is creation order; the oldest session is evicted first.
_sessions: dict[str, dict] = {}


class GenerateRequest(BaseModel):
    states: list[str]
    symbols: list[str]
    initial: list[float]
    transition: list[list[float]]
    emission: list[list[float]]
    length: int = Field(default=30, ge=1, le=MAX_LENGTH)
    seed: int | None = Field(default=42, ge=0, le=MAX_SEED)


class SessionRequest(BaseModel):
    length: int = Field(default=30, ge=1, le=MAX_LENGTH)
    seed: int | None = Field(default=42, ge=0, le=MAX_SEED)


class SessionResponse(BaseModel):
    session_id: str
    length: int


class PositionPoint(BaseModel):
    position: int
    state: str
    nucleotide: str


class SequenceResponse(BaseModel):
    length: int
    sequence: str
    gc_content: float
    data: list[PositionPoint]


class StreamResponse(BaseModel):
    session_id: str
    cursor: int
    remaining: int
    data: list[PositionPoint]


def _sequence_response(sequence) -> SequenceResponse:
    return SequenceResponse(
        length=len(sequence),
        sequence=nucleotide_string(sequence),
        gc_content=gc_content(sequence),
        data=[PositionPoint(**record) for record in to_records(sequence)],
    )


@router.get("/health")
def health():
    return {"status": "ok", "service": "sequence-generator"}


@router.get("/sequence/batch", response_model=SequenceResponse)
def get_batch(
    length: int = Query(default=30, ge=1, le=MAX_LENGTH),
    seed: int | None = Query(default=42, ge=0, le=MAX_SEED),
):
    """Generate a sequence from the AT-rich/GC-rich example model."""
    return _sequence_response(generate_sequence(length=length, seed=seed))


@router.post("/sequence/generate", response_model=SequenceResponse)
def generate_custom(req: GenerateRequest):
    """Generate a sequence from caller-supplied parameters."""
    params = ModelParameters(
        states=tuple(req.states),
        symbols=tuple(req.symbols),
        initial=req.initial,
        transition=req.transition,
        emission=req.emission,
    )
    # HMMError is mapped to 422 by the handler installed in create_app()
    sequence = generate_sequence(length=req.length, seed=req.seed, params=params)
    return _sequence_response(sequence)


def _evict_oldest_sessions(keep: int) -> None:
    while len(_sessions) > keep:
        oldest = next(iter(_sessions))
        logger.info(f"Evicting session {oldest} ({len(_sessions)} open)")
        del _sessions[oldest]


@router.post("/sequence/session", response_model=SessionResponse)
def create_session(req: SessionRequest):
    """
    Create a streaming session over a pre-generated sequence.

    At most MAX_SESSIONS are held; creating one more evicts the oldest.
    """
    _evict_oldest_sessions(keep=MAX_SESSIONS - 1)
    session_id = str(uuid.uuid4())
    _sessions[session_id] = {
        "sequence": generate_sequence(length=req.length, seed=req.seed),
        "cursor": 0,
        "length": req.length,
    }
    return SessionResponse(session_id=session_id, length=req.length)


@router.get("/sequence/stream", response_model=StreamResponse)
def stream_sequence(
    session_id: str = Query(...),
    count: int = Query(default=1, ge=1, le=1000),
):
    """
    Poll the next ``count`` positions from a session.

    Polling an exhausted session answers 410 once and drops it; later
    polls answer 404.
    """
    if session_id not in _sessions:
        raise HTTPException(status_code=404, detail="Session not found")

    session = _sessions[session_id]
    cursor = session["cursor"]
    length = session["length"]

    if cursor >= length:
        del _sessions[session_id]
        raise HTTPException(status_code=410, detail="Session exhausted")

    end = min(cursor + count, length)
    records = to_records(session["sequence"][cursor:end], start=cursor)

    session["cursor"] = end
    return StreamResponse(
        session_id=session_id,
        cursor=end,
        remaining=length - end,
        data=[PositionPoint(**record) for record in records],
    )


@router.delete("/sequence/session/{session_id}")
def delete_session(session_id: str):
    """Cleanup a session."""
    if session_id not in _sessions:
        raise HTTPException(status_code=404, detail="Session not found")
    del _sessions[session_id]
    return {"status": "deleted", "session_id": session_id}


def get_sessions_store():
    """Expose session store for testing."""
    return _sessions
