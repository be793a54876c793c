# config/settings.py
import os
import sys
from typing import Optional
from dotenv import load_dotenv
from pydantic import ValidationError, Field, PositiveFloat
from pydantic_settings import BaseSettings
from util.enums import Environment


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()


class Settings(BaseSettings):
    # App
    APP_ENV: str = Field(default=Environment.DEV.value, validation_alias="APP_ENV")
    ALLOWED_ORIGIN: str = Field(default="*", validation_alias="ALLOWED_ORIGIN")

    # Transcription provider (AssemblyAI-compatible)
    TRANSCRIPTION_API_URL: Optional[str] = Field(
        default=None, validation_alias="TRANSCRIPTION_API_URL"
    )
    TRANSCRIPTION_API_KEY: Optional[str] = Field(
        default=None, validation_alias="TRANSCRIPTION_API_KEY"
    )
    TRANSCRIPTION_LANGUAGE_CODE: str = Field(
        default="pt", validation_alias="TRANSCRIPTION_LANGUAGE_CODE"
    )

    # Polling
    POLL_INTERVAL_SECONDS: float = Field(
        default=3.0, gt=0, validation_alias="POLL_INTERVAL_SECONDS"
    )
    # None keeps polling until a terminal status is observed
    POLL_TIMEOUT_SECONDS: Optional[PositiveFloat] = Field(
        default=None, validation_alias="POLL_TIMEOUT_SECONDS"
    )

    # Outbound HTTP
    HTTP_TIMEOUT_SECONDS: float = Field(default=30.0, validation_alias="HTTP_TIMEOUT_SECONDS")
    UPLOAD_TIMEOUT_SECONDS: float = Field(
        default=300.0, validation_alias="UPLOAD_TIMEOUT_SECONDS"
    )
    CHAT_TIMEOUT_SECONDS: float = Field(default=60.0, validation_alias="CHAT_TIMEOUT_SECONDS")

    # Chat provider (OpenAI-compatible)
    OPENAI_API_KEY: Optional[str] = Field(default=None, validation_alias="OPENAI_API_KEY")
    OPENAI_API_URL: str = Field(
        default="https://api.openai.com/v1/chat/completions",
        validation_alias="OPENAI_API_URL",
    )
    OPENAI_MODEL: str = Field(default="gpt-4-turbo", validation_alias="OPENAI_MODEL")
    OPENAI_TEMPERATURE: float = Field(default=0.0, validation_alias="OPENAI_TEMPERATURE")

    # Logging knobs
    LOGGER_NAME: str = "transcript-relay"
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    LOG_TO_FILE: bool = Field(default=False, validation_alias="LOG_TO_FILE")
    LOG_DIR: str = Field(default="logs", validation_alias="LOG_DIR")
    LOG_FILE_NAME: str = Field(default="app.log", validation_alias="LOG_FILE_NAME")
    LOG_MAX_BYTES: int = Field(
        default=50 * 1024 * 1024, validation_alias="LOG_MAX_BYTES"
    )
    LOG_BACKUP_COUNT: int = Field(default=5, validation_alias="LOG_BACKUP_COUNT")

    # Prompts
    DESCRIPTION_SYSTEM_PROMPTS: list[str] = [
        "Se comporte como um especialista em sistemas que cria resumos a partir da transcrição de uma aula. "
        "Os resumos devem ter foco educacional para dar contexto sobre uma aula que será publicada numa "
        "plataforma de vídeos e deve explicar detalhes sobre o vídeo sem necessariamente replicar o passo "
        "à passo do vídeo.",
        "Responda em primeira pessoa como se você fosse o instrutor da aula. Utilize uma linguagem menos "
        "formal. Evite repetir as palavras muitas vezes, use sinônimos sempre que possível.",
        "Seja sucinto e retorne no máximo 80 palavras em markdown sem cabeçalhos.",
    ]
    DESCRIPTION_USER_PROMPT: str = (
        "Gere um resumo da transcrição abaixo. Retorne o resumo no mesmo idioma da transcrição. "
        "\n\n{transcription}"
    )

    ASK_SYSTEM_PROMPTS: list[str] = [
        "Se comporte como um especialista em sistemas e com base na transcrição tire as dúvidas.",
        "Responda de forma clara e objetiva para resolver o problema do usuário.",
        "Não fale que é um video tutorial e nem que as respostas são embasadas de uma transcrição. "
        "Tem que ser o mais normal possível.",
        "Caso não tenha certeza da sua resposta, informe que vai encaminhar a um especialista.",
    ]
    ASK_TRANSCRIPT_PROMPT: str = (
        "Responda com base na transcrição abaixo com muita atenção.\n\n {transcription}"
    )
    ASK_USER_PROMPT: str = "Gere a resposta da pergunta abaixo.. \n\n{question}"

    @property
    def transcription_configured(self) -> bool:
        return bool(self.TRANSCRIPTION_API_URL and self.TRANSCRIPTION_API_KEY)

    @property
    def chat_configured(self) -> bool:
        return bool(self.OPENAI_API_KEY)


try:
    settings = Settings()
except ValidationError as e:
    print("❌ Missing/invalid environment variables:", file=sys.stderr)
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", []))
        msg = err.get("msg", "")
        print(f" - {loc}: {msg}", file=sys.stderr)
    sys.exit(1)
except Exception as e:
    print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
    sys.exit(1)
