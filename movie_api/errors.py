# ------------------------------------------------------------
# errors.py - 저장소(DB) 예외 분류
# ------------------------------------------------------------
# 어댑터는 SQLAlchemy 예외 클래스를 직접 분기하지 않고
# 여기서 분류한 StoreErrorKind만 보고 응답을 결정함.
# 저장소를 바꾸면 classify_store_error만 고치면 됨.

from enum import Enum

from sqlalchemy.exc import IntegrityError, NoResultFound

# 드라이버별 UNIQUE 위반 신호
# - PostgreSQL: SQLSTATE 23505
# - MySQL(PyMySQL): 에러 코드 1062 (ER_DUP_ENTRY)
# - SQLite: "UNIQUE constraint failed: ..." 메시지
_UNIQUE_SQLSTATE = "23505"
_MYSQL_DUP_ENTRY = 1062
_UNIQUE_MESSAGES = ("unique constraint failed", "duplicate entry", "duplicate key value")


class StoreErrorKind(str, Enum):
    NOT_FOUND = "not_found"   # 대상 레코드 없음 (예: 삭제할 행이 없음)
    CONFLICT = "conflict"     # UNIQUE 제약 위반 (이름/PK 중복)
    UNKNOWN = "unknown"       # 그 외 모든 예외 (NOT NULL/CHECK/FK 위반, 연결 끊김 등)


def _is_unique_violation(error: IntegrityError) -> bool:
    orig = error.orig
    if getattr(orig, "pgcode", None) == _UNIQUE_SQLSTATE or getattr(orig, "sqlstate", None) == _UNIQUE_SQLSTATE:
        return True
    args = getattr(orig, "args", ())
    if args and args[0] == _MYSQL_DUP_ENTRY:
        return True
    message = str(orig).lower()
    return any(text in message for text in _UNIQUE_MESSAGES)


def classify_store_error(error: BaseException) -> StoreErrorKind:
    if isinstance(error, NoResultFound):
        return StoreErrorKind.NOT_FOUND
    if isinstance(error, IntegrityError) and _is_unique_violation(error):
        return StoreErrorKind.CONFLICT
    return StoreErrorKind.UNKNOWN
