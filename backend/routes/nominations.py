import logging
from typing import Optional

from fastapi import APIRouter, Body, HTTPException

import config
import store
from models.base import CamelModel
from models.nomination import Nomination
from routes.session import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["nominations"])


# ---------- Request schema ----------

class SubmitNominationRequest(CamelModel):
    session_id: Optional[str] = None
    nominator_name: Optional[str] = None
    nominee_name: Optional[str] = None
    reason: Optional[str] = None


# ---------- Endpoint ----------

@router.post("/nominations", response_model=SuccessResponse)
def submit_nomination(body: Optional[SubmitNominationRequest] = Body(default=None)):
    """
    Appends a nomination to the session's list, in arrival order.
    Nominee names are neither validated nor de-duplicated.
    """
    body = body or SubmitNominationRequest()
    with store.db.mutate() as doc:
        session = doc.sessions.get(body.session_id) if body.session_id else None
        if session is None:
            raise HTTPException(status_code=404, detail="Session not found")
        if not session.is_active and not config.ACCEPT_CLOSED_NOMINATIONS:
            raise HTTPException(status_code=409, detail="Session is closed")

        nomination = Nomination(
            nominator_name=body.nominator_name or "Anonymous",
            nominee_name=body.nominee_name or "",
            reason=body.reason or "",
        )
        doc.nominations.setdefault(body.session_id, []).append(nomination)
        count = len(doc.nominations[body.session_id])

    logger.info("Session %s received nomination #%d", body.session_id, count)
    return SuccessResponse()
