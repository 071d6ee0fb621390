from models.document import Document
from models.nomination import Nomination
from models.session import Session
from models.tally import NomineeTally, ResultsSummary

__all__ = ["Document", "Nomination", "Session", "NomineeTally", "ResultsSummary"]
