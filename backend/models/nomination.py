from datetime import datetime

from pydantic import Field

from models.base import CamelModel
from models.session import utcnow


class Nomination(CamelModel):
    nominator_name: str = "Anonymous"
    nominee_name: str = ""
    reason: str = ""
    timestamp: datetime = Field(default_factory=utcnow)
