import logging
from concurrent.futures import Executor, Future
from typing import Any, Callable, Optional

from .config import Settings
from .errors import ConfigError, TransportError
from .schemas import TodoResponse
from .transport.base import Transport
from .transport.http import RequestsTransport

logger = logging.getLogger(__name__)

TodoCallback = Callable[[Optional[int], Any], None]


class TodoClient:
    """Fetches single todos from the todo service."""

    def __init__(self, transport: Optional[Transport] = None, base_url: Optional[str] = None):
        if base_url is None:
            base_url = Settings.from_env().base_url
        if not base_url:
            raise ConfigError("base_url must not be empty")

        self.base_url = base_url[:-1] if base_url.endswith("/") else base_url
        self.transport = transport or RequestsTransport()

    def __enter__(self) -> "TodoClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self.transport.close()

    def todo_url(self, todo_id: Any) -> str:
        return f"{self.base_url}/todos/{todo_id}"

    def get_todo(self, todo_id: Any) -> TodoResponse:
        target = self.todo_url(todo_id)
        logger.info(f"Calling: {target}")

        try:
            res = self.transport.get(target, {"json": True})
        except TransportError as e:
            logger.warning(f"No response from {target}: {e}")
            return TodoResponse(error=e)

        return TodoResponse(status_code=res.status_code, body=res.body)

    def get_todo_async(self, todo_id: Any, executor: Optional[Executor] = None) -> "Future[TodoResponse]":
        if executor is not None:
            return executor.submit(self.get_todo, todo_id)

        # inline: the future is already resolved when returned
        future: "Future[TodoResponse]" = Future()
        try:
            future.set_result(self.get_todo(todo_id))
        except Exception as e:
            future.set_exception(e)
        return future


def get_todo(todo_id: Any, callback: TodoCallback, client: Optional[TodoClient] = None) -> None:
    """
    Fetch a todo and report (status_code, body) to callback exactly once.
    On a transport failure the callback receives (None, None).
    A client created here is closed before returning.
    """
    if client is not None:
        result = client.get_todo(todo_id)
    else:
        with TodoClient() as owned:
            result = owned.get_todo(todo_id)
    callback(result.status_code, result.body)
