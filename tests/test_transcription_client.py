import json

import httpx
import pytest

from core import transcription_client
from core.transcription_client import TranscriptionClient
from model.transcript import Transcript
from util.errors import MalformedResponse, ProviderUnavailable, ResourceNotFound
from tests.conftest import json_response


@pytest.mark.asyncio
async def test_submit_posts_audio_url_and_returns_id(make_http):
    http, transport = make_http(lambda req: json_response(200, {"id": "abc123", "status": "queued"}))
    client = TranscriptionClient(http, configured=True)

    job_id = await client.submit("https://x/a.mp3", "pt")

    assert job_id == "abc123"
    (req,) = transport.requests
    assert req.method == "POST"
    assert req.url == "https://provider.test/v2/transcript"
    assert json.loads(req.content) == {"audio_url": "https://x/a.mp3", "language_code": "pt"}


@pytest.mark.asyncio
async def test_submit_without_language_omits_the_field(make_http):
    http, transport = make_http(lambda req: json_response(200, {"id": "abc123"}))

    await TranscriptionClient(http, configured=True).submit("https://x/a.mp3")

    assert json.loads(transport.requests[0].content) == {"audio_url": "https://x/a.mp3"}


@pytest.mark.asyncio
async def test_submit_without_id_is_malformed(make_http):
    http, _ = make_http(lambda req: json_response(200, {"status": "queued"}))

    with pytest.raises(MalformedResponse):
        await TranscriptionClient(http, configured=True).submit("https://x/a.mp3")


@pytest.mark.asyncio
async def test_submit_with_non_json_body_is_malformed(make_http):
    http, _ = make_http(lambda req: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(MalformedResponse):
        await TranscriptionClient(http, configured=True).submit("https://x/a.mp3")


@pytest.mark.asyncio
async def test_non_success_status_is_provider_unavailable(make_http):
    http, _ = make_http(lambda req: json_response(401, {"error": "Invalid API key"}))

    with pytest.raises(ProviderUnavailable) as exc_info:
        await TranscriptionClient(http, configured=True).submit("https://x/a.mp3")

    assert "401" in exc_info.value.detail


@pytest.mark.asyncio
async def test_transport_failure_is_provider_unavailable(make_http):
    def boom(request):
        raise httpx.ConnectError("connection refused", request=request)

    http, _ = make_http(boom)

    with pytest.raises(ProviderUnavailable):
        await TranscriptionClient(http, configured=True).fetch_status("abc123")


@pytest.mark.asyncio
async def test_fetch_status_preserves_fields(make_http):
    body = {
        "id": "abc123",
        "status": "completed",
        "text": "hello world",
        "language_code": "pt",
        "error": None,
        "audio_duration": 12,
    }
    http, transport = make_http(lambda req: json_response(200, body))

    snapshot = await TranscriptionClient(http, configured=True).fetch_status("abc123")

    assert transport.requests[0].url == "https://provider.test/v2/transcript/abc123"
    assert snapshot.model_dump() == {
        "id": "abc123",
        "status": "completed",
        "text": "hello world",
        "languageCode": "pt",
        "error": None,
    }


@pytest.mark.asyncio
async def test_fetch_status_missing_optionals_stay_none(make_http):
    http, _ = make_http(lambda req: json_response(200, {"id": "abc123", "status": "queued"}))

    snapshot = await TranscriptionClient(http, configured=True).fetch_status("abc123")

    assert snapshot == Transcript(id="abc123", status="queued")
    assert snapshot.text is None
    assert snapshot.languageCode is None
    assert snapshot.error is None


@pytest.mark.asyncio
async def test_fetch_status_without_id_is_malformed(make_http):
    http, _ = make_http(lambda req: json_response(200, {"status": "queued"}))

    with pytest.raises(MalformedResponse):
        await TranscriptionClient(http, configured=True).fetch_status("abc123")


@pytest.mark.asyncio
async def test_upload_streams_file_bytes(make_http, tmp_path):
    audio = tmp_path / "lesson.mp3"
    audio.write_bytes(b"ID3" + b"\x00" * 200_000)
    http, transport = make_http(
        lambda req: json_response(200, {"upload_url": "https://cdn.provider.test/u/1"})
    )

    url = await TranscriptionClient(http, configured=True).upload_resource(str(audio))

    assert url == "https://cdn.provider.test/u/1"
    (req,) = transport.requests
    assert req.url == "https://provider.test/v2/upload"
    assert req.headers["content-type"] == "application/octet-stream"
    assert req.content == audio.read_bytes()


@pytest.mark.asyncio
async def test_upload_of_missing_file_makes_no_request(make_http):
    http, transport = make_http(lambda req: json_response(200, {"upload_url": "x"}))

    with pytest.raises(ResourceNotFound) as exc_info:
        await TranscriptionClient(http, configured=True).upload_resource("/nonexistent")

    assert "/nonexistent" in exc_info.value.detail
    assert transport.requests == []


@pytest.mark.asyncio
async def test_upload_response_without_url_is_malformed(make_http, tmp_path):
    audio = tmp_path / "a.wav"
    audio.write_bytes(b"RIFF")
    http, _ = make_http(lambda req: json_response(200, {"url": "x"}))

    with pytest.raises(MalformedResponse):
        await TranscriptionClient(http, configured=True).upload_resource(str(audio))


@pytest.mark.asyncio
async def test_unconfigured_provider_fails_without_network(make_http):
    http, transport = make_http(lambda req: json_response(200, {"id": "abc123"}))
    client = TranscriptionClient(http, configured=False)

    with pytest.raises(ProviderUnavailable):
        await client.submit("https://x/a.mp3")
    with pytest.raises(ProviderUnavailable):
        await client.fetch_status("abc123")

    assert transport.requests == []


@pytest.mark.asyncio
async def test_missing_file_is_reported_even_when_unconfigured(make_http):
    http, transport = make_http(lambda req: json_response(200, {"upload_url": "x"}))

    with pytest.raises(ResourceNotFound) as exc_info:
        await TranscriptionClient(http, configured=False).upload_resource("/nonexistent")

    assert "/nonexistent" in exc_info.value.detail
    assert transport.requests == []


@pytest.mark.asyncio
async def test_existing_file_with_unconfigured_provider_is_unavailable(make_http, tmp_path):
    audio = tmp_path / "a.wav"
    audio.write_bytes(b"RIFF")
    http, transport = make_http(lambda req: json_response(200, {"upload_url": "x"}))

    with pytest.raises(ProviderUnavailable):
        await TranscriptionClient(http, configured=False).upload_resource(str(audio))

    assert transport.requests == []


@pytest.mark.asyncio
async def test_read_failure_during_upload_is_resource_not_found(make_http, tmp_path, monkeypatch):
    audio = tmp_path / "broken.mp3"
    audio.write_bytes(b"ID3")

    async def failing_reader(fh, chunk_size=transcription_client.CHUNK_SIZE):
        yield await fh.read(1)
        raise OSError(5, "Input/output error")

    monkeypatch.setattr(transcription_client, "_iter_file", failing_reader)
    http, _ = make_http(lambda req: json_response(200, {"upload_url": "x"}))

    with pytest.raises(ResourceNotFound) as exc_info:
        await TranscriptionClient(http, configured=True).upload_resource(str(audio))

    assert exc_info.value.status_code == 400
    assert "Input/output error" in exc_info.value.detail


@pytest.mark.asyncio
async def test_directory_path_is_resource_not_found(make_http, tmp_path):
    http, transport = make_http(lambda req: json_response(200, {"upload_url": "x"}))

    with pytest.raises(ResourceNotFound):
        await TranscriptionClient(http, configured=True).upload_resource(str(tmp_path))

    assert transport.requests == []
