# controller/transcript_controller.py
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse
from model.api import AskRequest, GenerateDescriptionRequest
from model.transcript import Transcript
from service.assistant_service import AssistantService
from service.transcription_service import TranscriptionService
from util.constants import InternalURIs
from controller.controller_dependencies import (
    get_assistant_service,
    get_transcription_service,
)

transcript_router = APIRouter(tags=["transcript"])


@transcript_router.post(
    InternalURIs.UPLOAD,
    response_class=PlainTextResponse,
    status_code=status.HTTP_200_OK,
)
async def upload_file(
    filePath: Optional[str] = Query(default=None),
    service: TranscriptionService = Depends(get_transcription_service),
) -> str:
    return await service.upload(filePath)


@transcript_router.get(
    InternalURIs.TRANSCRIPT,
    response_model=Transcript,
    status_code=status.HTTP_200_OK,
)
async def transcribe(
    audioUrl: Optional[str] = Query(default=None),
    languageCode: Optional[str] = Query(default=None),
    service: TranscriptionService = Depends(get_transcription_service),
) -> Transcript:
    return await service.transcribe(audioUrl, languageCode)


@transcript_router.post(InternalURIs.GENERATE_DESCRIPTION, response_class=PlainTextResponse)
async def generate_description(
    payload: GenerateDescriptionRequest,
    service: AssistantService = Depends(get_assistant_service),
) -> str:
    return await service.generate_description(payload.transcription)


@transcript_router.post(InternalURIs.ASK, response_class=PlainTextResponse)
async def ask(
    payload: AskRequest,
    service: AssistantService = Depends(get_assistant_service),
) -> str:
    return await service.ask(payload.transcription, payload.question)
