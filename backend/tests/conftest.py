import pytest
import requests

from todo_client.client import TodoClient
from todo_client.transport.fake import FakeTransport

BASE_URL = "http://todos.example.test"


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def client(fake_transport):
    return TodoClient(transport=fake_transport, base_url=BASE_URL)


def make_response(status_code, content):
    response = requests.Response()
    response.status_code = status_code
    response._content = content
    response.encoding = "utf-8"
    return response
