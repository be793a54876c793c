# config/http_client.py
import logging
from typing import Optional
import httpx
from config.settings import settings

logger = logging.getLogger(__name__)

_transcription: Optional[httpx.AsyncClient] = None
_chat: Optional[httpx.AsyncClient] = None


def _limits() -> httpx.Limits:
    return httpx.Limits(max_connections=100, max_keepalive_connections=20)


def get_transcription_http() -> httpx.AsyncClient:
    """
    Process-wide client for the transcription provider.
    Base URL and authorization header are only set when both are configured.
    """
    global _transcription
    if _transcription is None:
        kwargs = {
            "timeout": httpx.Timeout(settings.HTTP_TIMEOUT_SECONDS),
            "limits": _limits(),
        }
        if settings.transcription_configured:
            kwargs["base_url"] = settings.TRANSCRIPTION_API_URL
            kwargs["headers"] = {"authorization": settings.TRANSCRIPTION_API_KEY}
        _transcription = httpx.AsyncClient(**kwargs)
    return _transcription


def get_chat_http() -> httpx.AsyncClient:
    global _chat
    if _chat is None:
        _chat = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.CHAT_TIMEOUT_SECONDS, connect=5.0),
            limits=_limits(),
        )
    return _chat


def warn_missing_credentials() -> list[str]:
    """Log one warning per provider that has no credentials. Returns their names."""
    missing: list[str] = []
    if not settings.transcription_configured:
        logger.warning(
            "config.transcription.missing TRANSCRIPTION_API_URL/TRANSCRIPTION_API_KEY unset; "
            "transcript endpoints will fail"
        )
        missing.append("transcription")
    if not settings.chat_configured:
        logger.warning("config.chat.missing OPENAI_API_KEY unset; ai endpoints will fail")
        missing.append("chat")
    return missing


async def close_http_clients() -> None:
    global _transcription, _chat
    for client in (_transcription, _chat):
        if client is not None:
            await client.aclose()
    _transcription = None
    _chat = None
