# ---------------------------------------------
# movies.py - 영화 CRUD 엔드포인트
# ---------------------------------------------

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..adapter import MovieAdapter
from ..db import get_db
from ..guards import require_fresh_token, valid_movie_id
from ..schemas import (
    ConflictMovieResponse,
    CreateMovieRequest,
    CreateMovieResponse,
    DeleteMovieResponse,
    ErrorResponse,
    GetMovieResponse,
    MovieNotFoundResponse,
    UpdateMovieRequest,
    UpdatedMovieResponse,
)
from ..service import MovieService

logger = logging.getLogger(__name__)

# - prefix: 이 라우터의 모든 엔드포인트 앞에 붙을 공통 경로
# - tags: 자동 문서화(Swagger UI)에서 그룹핑 이름
router = APIRouter(prefix="/movies", tags=["movies"])


def get_movie_service(db: Session = Depends(get_db)) -> MovieService:
    # 요청마다 세션 1개 -> 어댑터 -> 서비스 조립
    return MovieService(MovieAdapter(db))


def _respond(envelope: dict) -> JSONResponse:
    # 봉투의 status를 그대로 HTTP 상태코드로 사용
    return JSONResponse(status_code=envelope["status"], content=envelope)


def _request_body(schema) -> dict:
    # 바디는 서비스에서 직접 검증하므로(Any로 받음) 문서에만 스키마를 표시
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }


@router.get(
    "",
    response_model=GetMovieResponse,
    responses={404: {"model": MovieNotFoundResponse}},
    summary="List movies, or get one by name",
)
def list_movies(
    name: Optional[str] = Query(None, description="Movie name to search for"),
    service: MovieService = Depends(get_movie_service),
):
    """
    - GET /movies              -> 전체 목록 (비어 있으면 data=[])
    - GET /movies?name=Inception -> 해당 이름의 영화 1건, 없으면 404
    """
    if name:
        return _respond(service.get_movie_by_name(name))
    return _respond(service.list_movies())


@router.get(
    "/{id}",
    response_model=GetMovieResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": MovieNotFoundResponse}},
    summary="Get a movie by ID",
)
def get_movie(
    movie_id: int = Depends(valid_movie_id),
    service: MovieService = Depends(get_movie_service),
):
    return _respond(service.get_movie_by_id(movie_id))


@router.post(
    "",
    response_model=CreateMovieResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        409: {"model": ConflictMovieResponse},
        500: {"model": ErrorResponse},
    },
    dependencies=[Depends(require_fresh_token)],
    openapi_extra=_request_body(CreateMovieRequest),
    summary="Create a new movie",
)
def create_movie(
    payload: Any = Body(...),
    service: MovieService = Depends(get_movie_service),
):
    return _respond(service.create_movie(payload))


@router.put(
    "/{id}",
    response_model=UpdatedMovieResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": MovieNotFoundResponse},
        409: {"model": ConflictMovieResponse},
        500: {"model": ErrorResponse},
    },
    dependencies=[Depends(require_fresh_token)],
    openapi_extra=_request_body(UpdateMovieRequest),
    summary="Update a movie (partial)",
)
def update_movie(
    payload: Any = Body(...),
    movie_id: int = Depends(valid_movie_id),
    service: MovieService = Depends(get_movie_service),
):
    return _respond(service.update_movie(payload, movie_id))


@router.delete(
    "/{id}",
    response_model=DeleteMovieResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": MovieNotFoundResponse},
    },
    dependencies=[Depends(require_fresh_token)],
    summary="Delete a movie by ID",
)
def delete_movie(
    movie_id: int = Depends(valid_movie_id),
    service: MovieService = Depends(get_movie_service),
):
    try:
        envelope = service.delete_movie_by_id(movie_id)
    except Exception:
        # 어댑터는 예상 못한 삭제 실패를 봉투로 바꾸지 않고 다시 던짐
        logger.exception("deleting movie %s failed", movie_id)
        return JSONResponse(status_code=500, content={"status": 500, "message": "Internal server error"})
    return _respond(envelope)


# -----------------------------
# [추가 설명 / 실전 팁]
# -----------------------------
# 1) 바디 검증 위치
#    - payload를 Any로 받는 이유: FastAPI 기본 검증(422, {"detail": [...]}) 대신
#      서비스의 validate_schema가 400 + 사람이 읽는 메시지를 만들도록 하기 위함
#    - 대신 Swagger에 요청 스키마가 보이도록 openapi_extra로 직접 넣음.
#      schemas.py의 필드 제약을 바꾸면 문서도 자동으로 따라감
#
# 2) 인증
#    - 조회(GET)는 공개, 변경(POST/PUT/DELETE)은 require_fresh_token 필요
#    - 테스트용 토큰은 GET /auth/fake-token 으로 발급
#
# 3) 예시 요청
#    - POST   /movies        (JSON: {"name": "Inception", "year": 2010, "rating": 8.8})
#    - PUT    /movies/1      (JSON: {"rating": 9.0})
#    - DELETE /movies/1
