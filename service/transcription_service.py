# service/transcription_service.py
import logging
from typing import Optional
from config.settings import settings
from core.polling import JobPoller
from core.transcription_client import TranscriptionClient
from model.transcript import Transcript
from util.enums import ErrorMessage
from util.functions import require_text

logger = logging.getLogger(__name__)


class TranscriptionService:
    def __init__(self, client: TranscriptionClient, poller: JobPoller) -> None:
        self._client = client
        self._poller = poller

    async def upload(self, file_path: Optional[str]) -> str:
        """
        Stream a local audio file to the provider and return the URL to transcribe.
        Logs: path only (no payloads).
        """
        path = require_text(file_path, ErrorMessage.MISSING_FILE_PATH)
        upload_url = await self._client.upload_resource(path)
        logger.info("upload.ok path=%s", path)
        return upload_url

    async def transcribe(
        self, audio_url: Optional[str], language_code: Optional[str] = None
    ) -> Transcript:
        """
        Submit `audio_url` for transcription and block (cooperatively) until the job
        reaches a terminal status.
        """
        url = require_text(audio_url, ErrorMessage.MISSING_AUDIO_URL)
        language = (language_code or "").strip() or settings.TRANSCRIPTION_LANGUAGE_CODE
        job_id = await self._client.submit(url, language)
        transcript = await self._poller.wait_for(job_id)
        logger.info(
            "transcribe.ok job=%s lang=%s chars=%d",
            job_id,
            transcript.languageCode,
            len(transcript.text or ""),
        )
        return transcript
