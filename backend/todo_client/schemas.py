from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, StrictInt

from .errors import TransportError


class TodoRecord(BaseModel):
    id: int
    title: str
    due: date
    notes: str


class TransportResponse(BaseModel):
    status_code: StrictInt
    body: Any = None


class TodoResponse(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    status_code: Optional[StrictInt] = None
    body: Any = None
    error: Optional[TransportError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
