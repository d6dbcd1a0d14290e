class TodoClientError(Exception):
    pass


class ConfigError(TodoClientError):
    pass


class TransportError(TodoClientError):
    """No response was received for a request (DNS, connection, protocol)."""

    def __init__(self, target: str, message: str):
        super().__init__(f"{message} ({target})")
        self.target = target
