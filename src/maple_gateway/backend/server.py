"""FastAPI 서버 정의"""

import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..common.errors import GatewayError, InvalidRequestError
from ..identity import CredentialStore
from ..services import CharacterService
from ..upstream import NexonApiClient
from .config import ServerConfig, config as default_config, get_api_key
from .routes import character, health

logger = logging.getLogger(__name__)

LOG_DIR = Path("logs")

_file_logging_initialized = False


def setup_file_logging() -> None:
    """파일 로깅 설정 (RotatingFileHandler)

    여러 진입점(main.py, uvicorn --factory)에서 호출되어도
    한 번만 초기화됩니다.
    """
    global _file_logging_initialized
    if _file_logging_initialized:
        return
    _file_logging_initialized = True

    LOG_DIR.mkdir(exist_ok=True)
    handler = RotatingFileHandler(
        LOG_DIR / "backend.log",
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=2,  # 최대 3개 파일 보존
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    ))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.INFO)


def build_service(settings: ServerConfig, api_key: str) -> CharacterService:
    """저장소/클라이언트/해석기 조립"""
    store = CredentialStore(api_key)
    client = NexonApiClient(
        store,
        base_url=settings.api_base_url,
        timeout=settings.request_timeout,
        date_timezone=settings.date_timezone,
        date_offset_days=settings.date_offset_days,
    )
    return CharacterService(store, client)


def create_app(
    service: CharacterService | None = None,
    settings: ServerConfig | None = None,
    file_logging: bool = True,
) -> FastAPI:
    """FastAPI 앱 생성

    Args:
        service: 미리 조립된 서비스 (None이면 환경 변수의 API 키로 조립)
        settings: 서버 설정 (None이면 data/config.json 기반 전역 설정)
        file_logging: 파일 로깅 사용 여부
    """
    if file_logging:
        setup_file_logging()
    settings = settings or default_config
    if service is None:
        service = build_service(settings, get_api_key())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await app.state.character_service.close()
        logger.info("업스트림 세션 종료")

    app = FastAPI(
        title="MapleStory Gateway API",
        description="Nexon Open API 캐릭터 조회 게이트웨이",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.character_service = service

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        logger.info("%s %s - %s: %s", request.method, request.url.path, type(exc).__name__, exc)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("%s %s - 요청 검증 실패: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=InvalidRequestError.status_code,
            content={"detail": InvalidRequestError.detail},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error("%s %s - %s: %s", request.method, request.url.path, type(exc).__name__, exc)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 라우터 등록
    app.include_router(health.router, tags=["health"])
    app.include_router(character.router, prefix="/api/character", tags=["character"])

    return app
