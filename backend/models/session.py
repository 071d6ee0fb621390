from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from models.base import CamelModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Session(CamelModel):
    host_name: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    is_active: bool = True      # flips to False once, on close
