# ------------------------------------------------------------
# server.py - uvicorn으로 API 서버를 띄우는 실행 진입점
# ------------------------------------------------------------
#   python -m movie_api.server
#   movie-api                      (pip install 후 콘솔 스크립트)
#
# HOST/PORT는 환경변수(.env)에서 읽음. 기본값 0.0.0.0:3001

import logging

from uvicorn import Config, Server

from . import settings

logger = logging.getLogger(__name__)


def main() -> None:
    from .main import app

    logger.info("Server is running on %s...", settings.PORT)
    config = Config(app=app, host=settings.HOST, port=settings.PORT, reload=False, log_level="info")
    Server(config).run()


if __name__ == "__main__":
    main()
