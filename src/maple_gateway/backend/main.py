"""게이트웨이 서버 메인"""

import logging

import uvicorn

from .config import config
from .server import create_app, setup_file_logging


class _HealthLogFilter(logging.Filter):
    """헬스 체크 요청의 액세스 로그를 숨기는 필터"""

    def filter(self, record: logging.LogRecord) -> bool:
        return "/health" not in record.getMessage()


def main():
    """서버 실행"""
    setup_file_logging()
    app = create_app()
    logging.getLogger("uvicorn.access").addFilter(_HealthLogFilter())
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level="debug" if config.debug else "info",
    )


if __name__ == "__main__":
    main()
