from pydantic import BaseModel


class GenerateDescriptionRequest(BaseModel):
    transcription: str


class AskRequest(BaseModel):
    transcription: str
    question: str


class HealthResponse(BaseModel):
    ok: bool
