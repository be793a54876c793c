from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Transcript(BaseModel):
    """
    Snapshot of a remote transcription job.

    Accepts the provider's snake_case ``language_code`` as well as ``languageCode``;
    always serializes as ``languageCode``. Absent optional fields stay ``None``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1)
    status: str | None = None
    text: str | None = None
    languageCode: str | None = Field(
        default=None, validation_alias=AliasChoices("language_code", "languageCode")
    )
    error: str | None = None


class TranscriptRequest(BaseModel):
    audio_url: str
    language_code: str | None = None


class SubmittedJob(BaseModel):
    id: str = Field(min_length=1)


class UploadedResource(BaseModel):
    upload_url: str = Field(min_length=1)
