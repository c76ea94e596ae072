import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_chat_service
from app.client.db.memory import MemoryKeyValueStore
from app.main import app
from app.service.chat.chat import ChatService
from app.service.context.history_store import ChatHistoryStore


class FakeInference:
    def __init__(self, reply="Hi there!", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def complete(self, turns):
        self.calls.append(turns)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(scope="function")
def inference():
    return FakeInference()


@pytest.fixture(scope="function")
def store():
    return ChatHistoryStore(MemoryKeyValueStore())


@pytest.fixture(scope="function")
def chat_service(store, inference):
    return ChatService(store, inference)


#scope : function < class < module < package < session
@pytest.fixture(scope="function")
def client(chat_service):
    app.dependency_overrides[get_chat_service] = lambda: chat_service
    yield TestClient(app)
    app.dependency_overrides.clear()
