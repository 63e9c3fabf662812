# -------------------------------------------------------
# settings.py - 환경변수 기반 애플리케이션 설정
# -------------------------------------------------------

import os
from dotenv import load_dotenv

# .env 파일의 환경변수를 현재 프로세스 환경에 주입
# - 이미 설정된 환경변수는 덮어쓰지 않음 (테스트에서 DATABASE_URL 주입 가능)
load_dotenv()

# -----------------------------
# 앱 메타 정보 / 서버
# -----------------------------
APP_TITLE = os.getenv("APP_TITLE", "Movie API")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))

# -----------------------------
# 로깅
# -----------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None

# -----------------------------
# DB 접속 정보 (기본값 포함)
# -----------------------------
# NOTE: 기본값은 로컬 개발 편의를 위한 것이며,
#       운영환경에서는 반드시 안전한 비밀값으로 대체해야 합니다.
DB_USER = os.getenv("DB_USER", "fastapiid")
DB_PASSWORD = os.getenv("DB_PASSWORD", "fastapipw")
DB_HOST = os.getenv("DB_HOST", "127.0.0.1")
DB_PORT = os.getenv("DB_PORT", "3306")
DB_NAME = os.getenv("DB_NAME", "moviesdb")

# DATABASE_URL이 주어지면 그대로 사용 (예: sqlite:///./movies.db)
# 없으면 PyMySQL 드라이버를 쓰는 MySQL URL을 조립
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}?charset=utf8mb4",
)

# -----------------------------
# 인증 토큰 신선도
# -----------------------------
# 토큰(발급 시각)이 허용되는 최대 경과 시간(초). 기본 1시간
TOKEN_MAX_AGE_SECONDS = int(os.getenv("TOKEN_MAX_AGE_SECONDS", "3600"))
