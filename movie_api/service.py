# ------------------------------------------------------------
# service.py - 영화 도메인 서비스 (비즈니스 로직)
# ------------------------------------------------------------
# 서비스가 신경 쓰는 것은 MovieRepository 계약뿐.
# 저장소가 SQLAlchemy인지 인메모리인지 모르며, DB에 직접 접근하지 않음.
# 입력 검증 -> 저장소 위임 -> 응답 봉투 반환

import logging
from typing import Any, Optional

from .repository import Envelope, MovieRepository
from .schemas import CreateMovieRequest, UpdateMovieRequest
from .validation import validate_schema

logger = logging.getLogger(__name__)


class MovieService:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    def list_movies(self) -> Envelope:
        return self.movie_repository.list_movies()

    def get_movie_by_id(self, movie_id: int) -> Envelope:
        return self.movie_repository.get_movie_by_id(movie_id)

    def get_movie_by_name(self, name: str) -> Envelope:
        return self.movie_repository.get_movie_by_name(name)

    def delete_movie_by_id(self, movie_id: int) -> Envelope:
        return self.movie_repository.delete_movie_by_id(movie_id)

    def create_movie(self, data: Any, movie_id: Optional[int] = None) -> Envelope:
        """
        영화 생성.

        - CreateMovieRequest로 검증. 실패하면 저장소를 건드리지 않고 400
        - 성공하면 검증된 dict를 저장소에 넘김 (중복 이름이면 저장소가 409)
        """
        result = validate_schema(CreateMovieRequest, data)
        if not result.success:
            logger.debug("create rejected: %s", result.error)
            return {"status": 400, "error": result.error}
        return self.movie_repository.add_movie(result.data, movie_id)

    def update_movie(self, data: Any, movie_id: int) -> Envelope:
        """영화 부분 수정. 검증 실패 시 400, 나머지는 저장소가 판단"""
        result = validate_schema(UpdateMovieRequest, data)
        if not result.success:
            logger.debug("update of movie %s rejected: %s", movie_id, result.error)
            return {"status": 400, "error": result.error}
        return self.movie_repository.update_movie(result.data, movie_id)
