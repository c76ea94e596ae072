import logging
import secrets

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from starlette.middleware.sessions import SessionMiddleware

from app.api.chat.route import chat_router
from app.api.deps import build_chat_service
from app.config.config import get_settings

logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(name)s - %(message)s")
logger = logging.getLogger(__name__)

settings = get_settings()

app = FastAPI(title="zava_storefront_chat", version="0.1.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret_key or secrets.token_urlsafe(32),
    max_age=settings.session_idle_timeout,
    https_only=settings.app_env.lower() not in {"dev", "development", "local"},
)
app.include_router(router=chat_router)


@app.on_event("startup")
def init_chat_service() -> None:
    current = get_settings()
    app.state.chat_service = build_chat_service(current)
    logger.info("Chat service ready (model=%s)", current.phi4_model)


@app.get("/", include_in_schema=False)
def index():
    return RedirectResponse(url="/chat")


@app.get("/health")
def health():
    return {"status": "ok"}
