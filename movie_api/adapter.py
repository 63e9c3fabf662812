# ------------------------------------------------------------
# adapter.py - MovieRepository의 SQLAlchemy 구현체
# ------------------------------------------------------------
# 저장소(DB)에 접근하는 유일한 컴포넌트.
# 도메인 연산을 ORM 호출로 바꾸고, DB 예외를 통일된 응답 봉투로 변환함.
#
# 사용 예:
#   adapter = MovieAdapter(SessionLocal())
#   service = MovieService(adapter)

import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .errors import StoreErrorKind, classify_store_error
from .models import Movie
from .repository import Envelope, MovieRepository
from .schemas import MovieOut

logger = logging.getLogger(__name__)


def _serialize(movie: Movie) -> Dict[str, Any]:
    # ORM 객체 -> MovieOut 스키마 -> JSON으로 보낼 수 있는 dict
    return MovieOut.model_validate(movie).model_dump()


class MovieAdapter(MovieRepository):
    def __init__(self, db: Session):
        self.db = db

    def _handle_error(self, error: BaseException) -> None:
        # 원인은 서버 로그에만 남기고 응답에는 노출하지 않음
        if isinstance(error, SQLAlchemyError):
            logger.error("SQLAlchemy error code: %s Message: %s", error.code, error)
        elif isinstance(error, Exception):
            logger.error("Error: %s", error)
        else:
            logger.error("An unknown error occurred: %r", error)

    # 전체 영화 조회
    def list_movies(self) -> Envelope:
        try:
            movies = self.db.query(Movie).order_by(Movie.id).all()  # SELECT * FROM movies
            return {"status": 200, "data": [_serialize(m) for m in movies], "error": None}
        except Exception as error:
            self.db.rollback()
            self._handle_error(error)
            return {"status": 500, "data": None, "error": "Failed to retrieve movies"}

    # id로 영화 조회
    def get_movie_by_id(self, movie_id: int) -> Envelope:
        try:
            movie = self.db.query(Movie).filter(Movie.id == movie_id).one_or_none()
            if movie is None:
                return {"status": 404, "data": None, "error": f"Movie with {movie_id} not found"}
            return {"status": 200, "data": _serialize(movie), "error": None}
        except Exception as error:
            self.db.rollback()
            self._handle_error(error)
            return {"status": 500, "data": None, "error": "Internal server error"}

    # 이름으로 영화 조회
    def get_movie_by_name(self, name: str) -> Envelope:
        try:
            movie = self.db.query(Movie).filter(Movie.name == name).first()
            if movie is None:
                return {"status": 404, "data": None, "error": f"Movie with name {name} not found"}
            return {"status": 200, "data": _serialize(movie), "error": None}
        except Exception as error:
            self.db.rollback()
            self._handle_error(error)
            return {"status": 500, "data": None, "error": "Internal server error"}

    # id로 영화 삭제
    def delete_movie_by_id(self, movie_id: int) -> Envelope:
        try:
            # .one(): 행이 없으면 저장소가 NoResultFound를 던짐
            movie = self.db.query(Movie).filter(Movie.id == movie_id).one()
            self.db.delete(movie)
            self.db.commit()
            return {"status": 200, "message": f"Movie {movie_id} has been deleted"}
        except Exception as error:
            self.db.rollback()
            if classify_store_error(error) is StoreErrorKind.NOT_FOUND:
                return {"status": 404, "message": f"Movie with id {movie_id} not found"}
            self._handle_error(error)
            # 삭제 경로만 봉투로 바꾸지 않고 호출자에게 다시 던짐
            raise

    # 영화 생성
    def add_movie(self, data: Dict[str, Any], movie_id: Optional[int] = None) -> Envelope:
        name = data.get("name")
        try:
            # 같은 이름의 영화가 이미 있는지 먼저 확인 (있으면 INSERT 하지 않음)
            existing = self.db.query(Movie).filter(Movie.name == name).first()
            if existing is not None:
                return {"status": 409, "error": f"Movie {name} already exists"}

            values = dict(data)
            if movie_id is not None:
                values["id"] = movie_id
            # 호출자가 지정한 id가 이미 사용 중인지 확인
            if values.get("id") is not None:
                taken = self.db.query(Movie).filter(Movie.id == values["id"]).one_or_none()
                if taken is not None:
                    return {"status": 409, "error": f"Movie with id {values['id']} already exists"}

            movie = Movie(**values)
            self.db.add(movie)
            self.db.commit()
            self.db.refresh(movie)  # DB가 부여한 id 반영
            return {"status": 200, "data": _serialize(movie)}
        except Exception as error:
            self.db.rollback()
            # 사전 확인과 INSERT 사이에 같은 이름이 들어온 경우 UNIQUE 인덱스가 막음
            if classify_store_error(error) is StoreErrorKind.CONFLICT:
                return {"status": 409, "error": f"Movie {name} already exists"}
            self._handle_error(error)
            return {"status": 500, "error": "Internal server error"}

    # 영화 부분 수정
    def update_movie(self, data: Dict[str, Any], movie_id: int) -> Envelope:
        try:
            movie = self.db.query(Movie).filter(Movie.id == movie_id).one_or_none()
            if movie is None:
                return {"status": 404, "error": f"Movie with id {movie_id} not found"}

            # 보낸 필드만 변경. 경로의 id가 기준이므로 바디의 id는 무시
            for field, value in data.items():
                if field == "id":
                    continue
                setattr(movie, field, value)
            self.db.commit()
            self.db.refresh(movie)
            return {"status": 200, "data": _serialize(movie)}
        except Exception as error:
            self.db.rollback()
            # 다른 영화가 쓰는 이름으로 바꾸려는 경우
            if classify_store_error(error) is StoreErrorKind.CONFLICT:
                return {"status": 409, "error": f"Movie {data.get('name')} already exists"}
            self._handle_error(error)
            return {"status": 500, "error": "Internal server error"}
