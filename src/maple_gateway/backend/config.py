"""서버 설정"""

import json
import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

logger = logging.getLogger(__name__)

# 저장 대상 필드 (API 키는 절대 저장하지 않음)
_PERSIST_FIELDS = {
    "host",
    "port",
    "debug",
    "api_base_url",
    "request_timeout",
    "date_timezone",
    "date_offset_days",
}

CONFIG_FILE = Path("data/config.json")

API_KEY_ENV = "NEXON_API_KEY"


class ServerConfig(BaseModel):
    """서버 설정"""

    model_config = ConfigDict(validate_assignment=True)

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # 업스트림 설정
    api_base_url: str = "https://open.api.nexon.com/maplestory/v1"
    request_timeout: float = 10.0  # 초

    # 조회 날짜 기준 (당일 데이터 미반영 회피용으로 하루 전)
    date_timezone: str = "Asia/Seoul"
    date_offset_days: int = 1

    @field_validator("date_offset_days")
    @classmethod
    def validate_offset(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"date_offset_days는 0 이상이어야 합니다: {v}")
        return v

    def save(self) -> None:
        """설정을 JSON 파일로 저장"""
        try:
            data = {k: getattr(self, k) for k in _PERSIST_FIELDS}
            CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
            CONFIG_FILE.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning(f"설정 저장 실패: {e}")

    def load(self) -> None:
        """JSON 파일에서 설정 로드"""
        if not CONFIG_FILE.exists():
            return
        try:
            data = json.loads(CONFIG_FILE.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"설정 로드 실패: {e}")
            return
        if not isinstance(data, dict):
            logger.warning(f"설정 로드 실패: 객체가 아닌 JSON ({type(data).__name__})")
            return
        updates = {k: v for k, v in data.items() if k in _PERSIST_FIELDS}
        try:
            loaded = ServerConfig.model_validate({**self.model_dump(), **updates})
        except ValidationError as e:
            logger.warning(f"설정 값이 올바르지 않아 기본값 유지: {e}")
            return
        for key in updates:
            setattr(self, key, getattr(loaded, key))
        logger.info(f"설정 로드: base={self.api_base_url}, timeout={self.request_timeout}")


def get_api_key() -> str:
    """환경 변수(.env 포함)에서 Nexon Open API 키 읽기

    Raises:
        RuntimeError: 키가 설정되지 않음
    """
    load_dotenv(override=False)
    key = os.environ.get(API_KEY_ENV, "").strip()
    if not key:
        raise RuntimeError(f"{API_KEY_ENV} 환경 변수가 설정되지 않았습니다")
    return key


# 전역 설정 인스턴스
config = ServerConfig()
config.load()
