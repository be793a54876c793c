# main.py
import logging
import routes
from contextlib import asynccontextmanager
from util.constants import InternalURIs
from util.enums import Environment, Color
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.middleware.cors import CORSMiddleware
from config.settings import settings
from config.http_client import (
    close_http_clients,
    get_chat_http,
    get_transcription_http,
    warn_missing_credentials,
)
from fastapi.responses import JSONResponse
from model.api import HealthResponse
from util.logger import init_logger

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(fastApi: FastAPI):
    init_logger()
    print(f"{Color.GREEN}Initializing...{Color.RESET}")
    missing = warn_missing_credentials()
    if missing:
        print(f"{Color.YELLOW}Unconfigured providers: {', '.join(missing)}{Color.RESET}")
    # Build the shared outbound clients once, before the first request
    get_transcription_http()
    get_chat_http()
    print(f"{Color.BLUE}Server Started{Color.RESET}")

    try:
        yield
    finally:
        try:
            await close_http_clients()
        except Exception as e:
            logger.error("shutdown.http_close_error err=%s", e)

        print(f"{Color.RED}Server Shutdown{Color.RESET}")


app: FastAPI = FastAPI(title="Transcript Relay API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ALLOWED_ORIGIN],
    allow_credentials=True,  # Allow cookies and other credentials
    allow_methods=["GET", "POST"],  # Allowed HTTP Methods
    allow_headers=["Authorization", "Content-Type", "Accept"],  # Allowed HTTP Headers
)


@app.get(InternalURIs.HEALTH, response_model=HealthResponse)
async def healthz() -> HealthResponse:
    return HealthResponse(ok=True)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(x) for x in err.get('loc', []))}: {err.get('msg', '')}"
        for err in exc.errors()
    )
    logger.warning("request.invalid path=%s problems=%s", request.url.path, problems)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": f"Invalid request: {problems}"},
    )


routes.register_routes(app)

if __name__ == "__main__":
    import uvicorn

    reload = settings.APP_ENV == Environment.DEV
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=reload)
