# service/assistant_service.py
import logging
import httpx
from config.settings import settings
from core.chat_client import complete_chat, system, user
from model.chat import ChatMessage
from util.enums import ErrorMessage
from util.functions import require_text

logger = logging.getLogger(__name__)


def description_messages(transcription: str) -> list[ChatMessage]:
    messages = [system(p) for p in settings.DESCRIPTION_SYSTEM_PROMPTS]
    messages.append(user(settings.DESCRIPTION_USER_PROMPT.format(transcription=transcription)))
    return messages


def ask_messages(transcription: str, question: str) -> list[ChatMessage]:
    messages = [system(p) for p in settings.ASK_SYSTEM_PROMPTS]
    messages.append(system(settings.ASK_TRANSCRIPT_PROMPT.format(transcription=transcription)))
    messages.append(user(settings.ASK_USER_PROMPT.format(question=question)))
    return messages


class AssistantService:
    """
    Grounded chat features over a transcript: short description and Q&A.
    """

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def generate_description(self, transcription: str | None) -> str:
        text = require_text(transcription, ErrorMessage.MISSING_TRANSCRIPTION)
        logger.info("ai.describe.start chars=%d", len(text))
        return await complete_chat(self._http, description_messages(text))

    async def ask(self, transcription: str | None, question: str | None) -> str:
        text = require_text(transcription, ErrorMessage.MISSING_TRANSCRIPTION)
        q = require_text(question, ErrorMessage.MISSING_QUESTION)
        logger.info("ai.ask.start chars=%d question_chars=%d", len(text), len(q))
        return await complete_chat(self._http, ask_messages(text, q))
