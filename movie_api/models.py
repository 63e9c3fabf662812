# ------------------------------------------------------------
# models.py - SQLAlchemy ORM 모델 정의 (movies)
# ------------------------------------------------------------

from sqlalchemy import Column, Integer, String, Float
from .db import Base  # Declarative Base: 모든 ORM 모델의 베이스 클래스


# ------------------------------
# Movie: 영화 테이블
# ------------------------------
class Movie(Base):
    __tablename__ = "movies"  # 실제 DB 테이블명

    # 기본 키(PK). 요청에서 id를 주면 그 값을, 아니면 DB 자동 증가값 사용
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # 영화 이름. 중복 금지
    # - 어댑터가 생성 전에 이름 존재 여부를 먼저 확인하지만,
    #   동시 요청 경쟁 상황은 이 UNIQUE 인덱스가 최종적으로 막음
    name = Column(String(255), nullable=False, unique=True, index=True)

    # 개봉 연도 (1900~2024 범위 검증은 스키마 레이어 담당)
    year = Column(Integer, nullable=False)

    # 평점 (범위 제한 없음, 관례상 0~10)
    rating = Column(Float, nullable=False)

    def __repr__(self):
        return f"<Movie id={self.id} name={self.name!r} year={self.year}>"
