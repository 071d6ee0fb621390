from fastapi import APIRouter, HTTPException

import store
from models.nomination import Nomination
from models.tally import ResultsSummary
from scoring.tally import summarize

router = APIRouter(tags=["results"])


def _nominations_for(session_id: str) -> list[Nomination]:
    doc = store.db.read()
    if session_id not in doc.sessions:
        raise HTTPException(status_code=404, detail="Session not found")
    return doc.nominations.get(session_id, [])


@router.get("/results/{session_id}", response_model=list[Nomination])
def get_results(session_id: str):
    """Returns every nomination for the session, oldest first."""
    return _nominations_for(session_id)


@router.get("/results/{session_id}/summary", response_model=ResultsSummary)
def get_results_summary(session_id: str):
    """
    Returns per-nominee counts and percentages, most nominated first.
    """
    return summarize(session_id, _nominations_for(session_id))
