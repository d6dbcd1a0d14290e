from .base import Transport
from .fake import FakeTransport
from .http import RequestsTransport
