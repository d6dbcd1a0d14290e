import logging
from typing import Any, Dict, Optional

import requests

from ..errors import TransportError
from ..schemas import TransportResponse
from .base import Transport

logger = logging.getLogger(__name__)


class RequestsTransport(Transport):
    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()

    def _decode(self, response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            # non-JSON payloads are handed back as text
            logger.debug("Response body is not JSON, returning text")
            return response.text

    def get(self, target: str, options: Dict[str, Any]) -> TransportResponse:
        try:
            response = self.session.get(target)
        except requests.RequestException as e:
            raise TransportError(target, f"GET failed: {e}") from e

        body = self._decode(response) if options.get("json") else response.text
        return TransportResponse(status_code=response.status_code, body=body)

    def close(self) -> None:
        self.session.close()
