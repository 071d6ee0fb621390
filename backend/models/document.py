from pydantic import Field

from models.base import CamelModel
from models.nomination import Nomination
from models.session import Session


class Document(CamelModel):
    """The whole persisted state: one file, two mappings keyed by session ID."""

    sessions: dict[str, Session] = Field(default_factory=dict)
    nominations: dict[str, list[Nomination]] = Field(default_factory=dict)
