import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.api.deps import get_chat_service, get_session_id
from app.model.chat.chat_message import ChatMessage
from app.model.chat.chat_request import SendMessageRequest
from app.model.chat.chat_response import ErrorResponse
from app.service.chat.chat import EMPTY_MESSAGE_ERROR, ChatService, EmptyMessageError

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))

chat_router = APIRouter(prefix="/chat")


def _empty_message_response() -> JSONResponse:
    return JSONResponse(status_code=400, content=ErrorResponse(error=EMPTY_MESSAGE_ERROR).model_dump())


@chat_router.get("", response_class=HTMLResponse)
def chat_page(
    request: Request,
    session_id: str = Depends(get_session_id),
    service: ChatService = Depends(get_chat_service),
):
    logger.info("Loading chat page")
    history = service.get_history(session_id)
    return templates.TemplateResponse(request, "chat/index.html", {"history": history})


@chat_router.get("/history", response_model=list[ChatMessage])
def chat_history(
    session_id: str = Depends(get_session_id),
    service: ChatService = Depends(get_chat_service),
):
    return service.get_history(session_id)


@chat_router.post(
    "/send-message",
    response_model=ChatMessage,
    responses={400: {"model": ErrorResponse}},
)
async def send_message(
    req: Optional[SendMessageRequest] = None,
    session_id: str = Depends(get_session_id),
    service: ChatService = Depends(get_chat_service),
):
    message = req.message if req is not None else None
    try:
        return await service.send_message(session_id, message)
    except EmptyMessageError:
        return _empty_message_response()


@chat_router.post("/clear-history")
def clear_history(
    session_id: str = Depends(get_session_id),
    service: ChatService = Depends(get_chat_service),
):
    service.clear_history(session_id)
    return RedirectResponse(url=chat_router.url_path_for("chat_page"), status_code=303)
