from models.base import CamelModel


class NomineeTally(CamelModel):
    nominee_name: str
    count: int
    percentage: float         # 0.0 - 100.0, one decimal


class ResultsSummary(CamelModel):
    session_id: str
    total_nominations: int
    nominees: list[NomineeTally]
