# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class ErrorInfo(NamedTuple):
    message: str
    http_status: int


class ErrorMessage(Enum):
    MISSING_FILE_PATH = ErrorInfo("Missing required parameter: filePath", status.HTTP_400_BAD_REQUEST)
    MISSING_AUDIO_URL = ErrorInfo("Missing required parameter: audioUrl", status.HTTP_400_BAD_REQUEST)
    MISSING_TRANSCRIPTION = ErrorInfo("Missing required field: transcription", status.HTTP_400_BAD_REQUEST)
    MISSING_QUESTION = ErrorInfo("Missing required field: question", status.HTTP_400_BAD_REQUEST)
    TRANSCRIPTION_NOT_CONFIGURED = ErrorInfo(
        "Transcription provider is not configured", status.HTTP_400_BAD_REQUEST
    )
    CHAT_NOT_CONFIGURED = ErrorInfo("Chat provider is not configured", status.HTTP_400_BAD_REQUEST)
