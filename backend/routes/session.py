import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Body, HTTPException

import store
from models.base import CamelModel
from models.session import Session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["session"])


# ---------- Request / Response schemas ----------

class CreateSessionRequest(CamelModel):
    host_name: Optional[str] = None
    session_id: Optional[str] = None    # generated server-side when omitted


class CreateSessionResponse(CamelModel):
    success: bool = True
    session_id: str


class SuccessResponse(CamelModel):
    success: bool = True


# ---------- Endpoints ----------

@router.post("/sessions", response_model=CreateSessionResponse)
def create_session(body: Optional[CreateSessionRequest] = Body(default=None)):
    """
    Creates a new, active session under the given ID.
    An existing session with the same ID is replaced; its nominations are kept.
    """
    body = body or CreateSessionRequest()
    session_id = body.session_id or uuid.uuid4().hex[:8]

    with store.db.mutate() as doc:
        if session_id in doc.sessions:
            logger.warning("Session %s already exists, overwriting", session_id)
        doc.sessions[session_id] = Session(host_name=body.host_name)

    logger.info("Created session %s for host %r", session_id, body.host_name)
    return CreateSessionResponse(session_id=session_id)


@router.get("/sessions/{session_id}", response_model=Session)
def get_session(session_id: str):
    session = store.db.read().sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.post("/sessions/{session_id}/close", response_model=SuccessResponse)
def close_session(session_id: str):
    """
    Marks the session closed. Closing an already closed session is a no-op
    that still reports success; there is no way to reopen.
    """
    with store.db.mutate() as doc:
        session = doc.sessions.get(session_id)
        if session is None:
            raise HTTPException(status_code=404, detail="Session not found")
        session.is_active = False

    logger.info("Closed session %s", session_id)
    return SuccessResponse()
