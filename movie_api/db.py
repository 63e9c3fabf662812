# -------------------------------------------------------
# db.py - SQLAlchemy 세션/엔진 및 FastAPI 의존성 정의
# -------------------------------------------------------

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from .settings import DATABASE_URL


def _engine_options(url: str) -> dict:
    """
    DB 종류별 엔진 옵션

    - MySQL 등 서버형 DB:
        pool_pre_ping=True  -> 죽은 커넥션 감지/재연결 ('MySQL server has gone away' 예방)
        pool_recycle=3600   -> 1시간마다 커넥션 재생성
    - SQLite:
        check_same_thread=False -> FastAPI 스레드풀의 다른 스레드에서도 커넥션 사용
        인메모리(sqlite://)라면 StaticPool로 커넥션 1개를 공유해야
        모든 세션이 같은 DB를 봄
    """
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options
    return {"pool_pre_ping": True, "pool_recycle": 3600}


engine = create_engine(DATABASE_URL, **_engine_options(DATABASE_URL))

# - autocommit=False: 명시적 commit() 전까지 트랜잭션 유지
# - autoflush=False: 쿼리 실행 시 자동 flush 방지 (요청 단위 트랜잭션에서 예측 가능성↑)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 모든 ORM 모델이 상속받는 베이스 클래스
Base = declarative_base()


def get_db():
    """
    FastAPI 의존성 주입용 DB 세션 제공자(Generator)

    동작:
    1) 요청이 들어오면 SessionLocal()로 세션 생성
    2) 핸들러(또는 서비스 팩토리)에 주입(yield)
    3) 응답 후 finally 블록에서 세션 종료(close)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
