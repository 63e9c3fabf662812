# ------------------------------------------------------------
# repository.py - MovieRepository: 데이터 계층과 대화하는 메서드 계약(인터페이스)
# ------------------------------------------------------------
# 서비스는 이 계약에만 의존함. SQLAlchemy든, REST API든, 인메모리 저장소든
# 아래 메서드를 구현하기만 하면 서비스 코드 수정 없이 교체 가능.
# 모든 메서드는 {"status": int, "data" | "error" | "message": ...} 형태의
# 응답 봉투(dict)를 반환.

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

Envelope = Dict[str, Any]


class MovieRepository(ABC):

    @abstractmethod
    def list_movies(self) -> Envelope:
        """전체 영화 목록. 비어 있어도 200"""

    @abstractmethod
    def get_movie_by_id(self, movie_id: int) -> Envelope:
        """id로 영화 1건 조회. 없으면 404"""

    @abstractmethod
    def get_movie_by_name(self, name: str) -> Envelope:
        """이름으로 영화 1건 조회. 없으면 404"""

    @abstractmethod
    def delete_movie_by_id(self, movie_id: int) -> Envelope:
        """
        id로 영화 삭제.

        Returns:
            200 {"message": "Movie <id> has been deleted"}
            404 {"message": "Movie with id <id> not found"}

        Raises:
            그 외 예상하지 못한 저장소 예외는 응답으로 바꾸지 않고 그대로 던짐
        """

    @abstractmethod
    def add_movie(self, data: Dict[str, Any], movie_id: Optional[int] = None) -> Envelope:
        """영화 생성. 같은 이름이 있으면 409"""

    @abstractmethod
    def update_movie(self, data: Dict[str, Any], movie_id: int) -> Envelope:
        """보낸 필드만 부분 수정. id가 없으면 404"""
