# core/transcription_client.py
import logging
from typing import Any, AsyncIterator, TypeVar
import anyio
import httpx
from pydantic import BaseModel, ValidationError
from config.settings import settings
from model.transcript import SubmittedJob, Transcript, TranscriptRequest, UploadedResource
from util.enums import ErrorMessage
from util.errors import MalformedResponse, ProviderUnavailable, ResourceNotFound
from util.timing import timed

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

UPLOAD_PATH = "upload"
TRANSCRIPT_PATH = "transcript"
CHUNK_SIZE = 64 * 1024


async def _iter_file(
    fh: anyio.AsyncFile[bytes], chunk_size: int = CHUNK_SIZE
) -> AsyncIterator[bytes]:
    while True:
        chunk = await fh.read(chunk_size)
        if not chunk:
            break
        yield chunk


def _decode(res: httpx.Response, model: type[M], what: str) -> M:
    """
    Validate a provider body against `model`. Any parse or shape error is a MalformedResponse.
    """
    try:
        return model.model_validate_json(res.content)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(x) for x in err.get("loc", ())) or err.get("type", "?")
            for err in e.errors()
        )
        logger.error("transcript.malformed what=%s fields=%s", what, fields)
        raise MalformedResponse(f"Malformed {what} response from transcription provider ({fields})")


class TranscriptionClient:
    """
    Thin wrapper around the transcription provider's upload / transcript endpoints.
    Each call performs exactly one outbound request and keeps no state.
    """

    def __init__(
        self, http: httpx.AsyncClient, *, configured: bool | None = None
    ) -> None:
        self._http = http
        self._configured = (
            settings.transcription_configured if configured is None else configured
        )

    def _ensure_configured(self) -> None:
        if not self._configured:
            raise ProviderUnavailable.of(ErrorMessage.TRANSCRIPTION_NOT_CONFIGURED)

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            res = await self._http.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error("transcript.request_error url=%s err=%s", url, type(e).__name__)
            raise ProviderUnavailable(
                f"Transcription provider request failed: {type(e).__name__}"
            )

        if res.status_code // 100 != 2:
            logger.error("transcript.bad_status url=%s status=%d", url, res.status_code)
            raise ProviderUnavailable(
                f"Transcription provider returned HTTP {res.status_code}: {res.text[:200]}"
            )
        return res

    async def upload_resource(self, file_path: str) -> str:
        """
        Stream a local file to the provider's storage and return its upload URL.
        The file is opened before the provider configuration is checked and before
        any network call is made; open or read failures are ResourceNotFound.
        """
        try:
            fh = await anyio.open_file(file_path, "rb")
        except OSError as e:
            logger.warning("transcript.upload.open_error path=%s err=%s", file_path, type(e).__name__)
            raise ResourceNotFound(f"Could not open file: {file_path}")

        async with fh:
            self._ensure_configured()
            try:
                with timed(logger, "transcript.upload", path=file_path):
                    res = await self._send(
                        "POST",
                        UPLOAD_PATH,
                        content=_iter_file(fh),
                        headers={"content-type": "application/octet-stream"},
                        timeout=settings.UPLOAD_TIMEOUT_SECONDS,
                    )
            except OSError as e:
                logger.warning("transcript.upload.read_error path=%s err=%s", file_path, type(e).__name__)
                raise ResourceNotFound(f"Could not read file: {file_path} ({e.strerror or type(e).__name__})")
        return _decode(res, UploadedResource, "upload").upload_url

    async def submit(self, audio_url: str, language_code: str | None = None) -> str:
        self._ensure_configured()
        payload = TranscriptRequest(audio_url=audio_url, language_code=language_code)
        with timed(logger, "transcript.submit"):
            res = await self._send(
                "POST", TRANSCRIPT_PATH, json=payload.model_dump(exclude_none=True)
            )
        job = _decode(res, SubmittedJob, "submit")
        logger.info("transcript.submitted job=%s", job.id)
        return job.id

    async def fetch_status(self, job_id: str) -> Transcript:
        self._ensure_configured()
        res = await self._send("GET", f"{TRANSCRIPT_PATH}/{job_id}")
        return _decode(res, Transcript, "status")
