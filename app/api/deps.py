import uuid

from fastapi import Request

from app.client.db.redis import build_key_value_store
from app.client.llm.inference import OpenAIInferenceClient
from app.client.secret.keyvault import fetch_secret
from app.config.config import Settings
from app.service.chat.chat import ChatService
from app.service.context.history_store import ChatHistoryStore

SESSION_ID_KEY = "chat_session_id"


def build_chat_service(settings: Settings) -> ChatService:
    settings.validate()
    api_key = fetch_secret(settings.keyvault_uri, settings.phi4_secret_name)
    inference = OpenAIInferenceClient(
        endpoint=settings.phi4_endpoint,
        api_key=api_key,
        model=settings.phi4_model,
    )
    store = ChatHistoryStore(
        build_key_value_store(settings.redis_url),
        ttl_seconds=settings.session_idle_timeout,
    )
    return ChatService(store, inference, history_limit=settings.chat_history_limit)


def get_chat_service(request: Request) -> ChatService:
    return request.app.state.chat_service


def get_session_id(request: Request) -> str:
    session_id = request.session.get(SESSION_ID_KEY)
    if not session_id:
        session_id = uuid.uuid4().hex
        request.session[SESSION_ID_KEY] = session_id
    return session_id
