# ------------------------------------------------------------
# main.py - FastAPI 앱/예외 핸들러/라우터 등록 진입점
# ------------------------------------------------------------

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import settings
from .db import Base, engine                      # SQLAlchemy Base/Engine (테이블 생성에 사용)
from .guards import GuardRejection
from .logging_config import setup_logging
from .routers import auth, movies                 # 모듈화된 라우터들(토큰/영화)
from .schemas import HealthResponse
from .validation import format_validation_errors

# 다른 모듈이 로그를 남기기 전에 로깅부터 설정
setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

# 앱 시작 시점에 ORM 메타데이터 기준으로 테이블을 생성
# - "존재하지 않는 테이블만" 생성하므로 반복 실행해도 안전
Base.metadata.create_all(bind=engine)

# title은 문서화(Swagger UI, /docs)에서 표시되는 서비스 제목
app = FastAPI(title=settings.APP_TITLE)

# 개발 단계에서는 allow_* 를 "*" 로 넓게 두고, 운영에서는 특정 도메인으로 제한 권장
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------------------------------
# 예외 -> 응답 봉투 변환
# -------------------------------
@app.exception_handler(GuardRejection)
async def guard_rejection_handler(request: Request, exc: GuardRejection):
    # 가드(ID 형식/토큰)가 요청을 막은 경우. 서비스까지 가지 않음
    return JSONResponse(status_code=exc.status, content=exc.to_envelope())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # 바디가 없거나 JSON이 깨진 경우 등. FastAPI 기본 422 대신 봉투 형식의 400
    return JSONResponse(
        status_code=400,
        content={"status": 400, "error": format_validation_errors(exc.errors())},
    )


# -------------------------------
# 라우터 등록
# -------------------------------
# - movies: /movies
# - auth:   /auth/fake-token
app.include_router(movies.router)
app.include_router(auth.router)


# -------------------------------
# 상태 확인(헬스체크)용 루트 엔드포인트
# -------------------------------
@app.get("/", response_model=HealthResponse, summary="Health check")
def root():
    return {"message": "Server is running"}
