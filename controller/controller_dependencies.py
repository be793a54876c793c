# controller/controller_dependencies.py
from config.http_client import get_chat_http, get_transcription_http
from config.settings import settings
from core.polling import JobPoller
from core.transcription_client import TranscriptionClient
from service.assistant_service import AssistantService
from service.transcription_service import TranscriptionService


def get_transcription_service() -> TranscriptionService:
    _client = TranscriptionClient(get_transcription_http())
    _poller = JobPoller(
        _client.fetch_status,
        interval=settings.POLL_INTERVAL_SECONDS,
        timeout=settings.POLL_TIMEOUT_SECONDS,
    )
    _service = TranscriptionService(_client, _poller)
    return _service


def get_assistant_service() -> AssistantService:
    return AssistantService(get_chat_http())
