# core/chat_client.py
import logging
from typing import Any, Dict, Sequence
import httpx
from pydantic import ValidationError
from config.settings import settings
from model.chat import ChatCompletion, ChatMessage
from util.enums import ErrorMessage
from util.errors import MalformedResponse, ProviderUnavailable
from util.timing import timed

logger = logging.getLogger(__name__)


async def _post_json(
    client: httpx.AsyncClient, url: str, headers: Dict[str, str], payload: Dict[str, Any]
) -> httpx.Response:
    """
    Make a JSON POST to `url`. Transport errors and non-2xx become ProviderUnavailable.
    """
    try:
        r = await client.post(url, headers=headers, json=payload)
    except httpx.RequestError as e:
        logger.error("ai.request_error err=%s", type(e).__name__)
        raise ProviderUnavailable(f"Chat provider request failed: {type(e).__name__}")
    if r.status_code // 100 != 2:
        logger.error("ai.bad_status status=%d", r.status_code)
        raise ProviderUnavailable(f"Chat provider returned HTTP {r.status_code}: {r.text[:200]}")
    return r


def system(content: str) -> ChatMessage:
    return ChatMessage(role="system", content=content)


def user(content: str) -> ChatMessage:
    return ChatMessage(role="user", content=content)


async def complete_chat(
    client: httpx.AsyncClient,
    messages: Sequence[ChatMessage],
    *,
    api_key: str | None = None,
    model: str | None = None,
    api_url: str | None = None,
    temperature: float | None = None,
) -> str:
    """
    Run one chat completion and return the first choice's text.
    Omitted arguments fall back to settings.
    """
    api_key = api_key if api_key is not None else settings.OPENAI_API_KEY
    if not api_key:
        raise ProviderUnavailable.of(ErrorMessage.CHAT_NOT_CONFIGURED)

    model = model or settings.OPENAI_MODEL
    headers = {
        "authorization": f"Bearer {api_key}",
        "content-type": "application/json",
    }
    payload = {
        "model": model,
        "messages": [m.model_dump() for m in messages],
        "temperature": settings.OPENAI_TEMPERATURE if temperature is None else temperature,
    }
    with timed(logger, "ai.chat", model=model, messages=len(messages)):
        res = await _post_json(client, api_url or settings.OPENAI_API_URL, headers, payload)

    try:
        completion = ChatCompletion.model_validate_json(res.content)
    except ValidationError:
        logger.error("ai.chat.malformed preview=%s", res.text[:200])
        raise MalformedResponse("Malformed response from chat provider")

    if not completion.choices:
        raise MalformedResponse("Chat provider returned no choices")

    text = completion.choices[0].message.content
    logger.info("ai.chat.ok model=%s chars=%d", completion.model or model, len(text))
    return text
