import asyncio
import logging
from typing import Optional

from app.client.llm.inference import InferenceClient, InferenceRequestError
from app.model.chat.chat_message import ChatMessage, ChatRole
from app.service.context.history_store import ChatHistoryStore

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a helpful shopping assistant for the Zava Storefront. "
    "You help customers with product questions, recommendations, and general inquiries. "
    "Keep responses concise and friendly."
)
FALLBACK_REPLY = "Sorry, I'm having trouble connecting right now. Please try again later."
EMPTY_MESSAGE_ERROR = "Message cannot be empty."


class EmptyMessageError(ValueError):
    def __init__(self) -> None:
        super().__init__(EMPTY_MESSAGE_ERROR)


class ChatService:
    def __init__(
        self,
        store: ChatHistoryStore,
        inference: InferenceClient,
        system_prompt: str = SYSTEM_PROMPT,
        history_limit: int = 0,
    ) -> None:
        self.store = store
        self.inference = inference
        self.system_prompt = system_prompt
        # 0 sends the whole history
        self.history_limit = history_limit

    def get_history(self, session_id: str) -> list[ChatMessage]:
        return self.store.load(session_id)

    def clear_history(self, session_id: str) -> None:
        self.store.clear(session_id)
        logger.info("Chat history cleared for session=%s", session_id)

    def build_request_turns(self, history: list[ChatMessage]) -> list[dict[str, str]]:
        """
        Translate stored turns into the inference request shape.
        The system instruction always comes first; ``history_limit`` only
        narrows what is sent, never what is stored.
        """
        window = history[-self.history_limit:] if self.history_limit else history
        turns = [{"role": "system", "content": self.system_prompt}]
        turns.extend({"role": msg.role.value, "content": msg.content} for msg in window)
        return turns

    async def send_message(self, session_id: str, message: Optional[str]) -> ChatMessage:
        if not message or not message.strip():
            raise EmptyMessageError()

        logger.info("User sent chat message: %s chars", len(message))
        history = await asyncio.to_thread(self.store.load, session_id)
        history.append(ChatMessage(role=ChatRole.USER, content=message))

        turns = self.build_request_turns(history)
        try:
            logger.info("Sending chat request to inference endpoint with %s messages", len(turns))
            reply = await asyncio.to_thread(self.inference.complete, turns)
        except InferenceRequestError as exc:
            logger.exception("Inference request failed with status %s", exc.status)
            reply_message = ChatMessage(role=ChatRole.ASSISTANT, content=FALLBACK_REPLY)
        else:
            logger.info("Received response from inference endpoint")
            reply_message = ChatMessage(role=ChatRole.ASSISTANT, content=reply)

        history.append(reply_message)
        await asyncio.to_thread(self.store.save, session_id, history)
        return reply_message
