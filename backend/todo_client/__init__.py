from .client import TodoClient, get_todo
from .errors import ConfigError, TodoClientError, TransportError
from .logging import configure_logging
from .schemas import TodoRecord, TodoResponse

__all__ = [
    "TodoClient",
    "get_todo",
    "TodoRecord",
    "TodoResponse",
    "TodoClientError",
    "ConfigError",
    "TransportError",
    "configure_logging",
]
