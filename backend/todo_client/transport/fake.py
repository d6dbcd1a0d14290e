from datetime import date
from typing import Any, Dict, List

from ..schemas import TodoRecord, TransportResponse
from .base import Transport

FAKE_STATUS_CODE = 200
FAKE_TODO = TodoRecord(
    id=168,
    title="fix website",
    due=date(2020, 6, 6),
    notes="!do this!",
)


class FakeTransport(Transport):
    """Answers every request with the same todo, whatever id was asked for."""

    def __init__(self):
        self.requested: List[str] = []

    def get(self, target: str, options: Dict[str, Any]) -> TransportResponse:
        self.requested.append(target)
        return TransportResponse(
            status_code=FAKE_STATUS_CODE,
            body=FAKE_TODO.model_dump(mode="json"),
        )
