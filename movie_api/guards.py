# ------------------------------------------------------------
# guards.py - 서비스 진입 전 요청 검사 (ID 형식 / 토큰 신선도)
# ------------------------------------------------------------
# 가드는 요청이 비즈니스 로직에 닿기 전에 멈춰 세우는 검문소.
# 실패하면 GuardRejection을 던지고, main.py의 예외 핸들러가
# {"status": ..., "error": ...} JSON 응답으로 바꿔 즉시 돌려보냄.
# (이후 의존성/라우트 핸들러는 실행되지 않음)

import logging
import re
from datetime import datetime, timezone
from typing import Optional

from fastapi import Header, Path

from . import settings

logger = logging.getLogger(__name__)

# 앞쪽 공백 + 부호(선택) + 숫자. 뒤에 붙은 문자는 무시 ("12abc" -> 12)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class GuardRejection(Exception):
    def __init__(self, status: int, error: str):
        super().__init__(error)
        self.status = status
        self.error = error

    def to_envelope(self) -> dict:
        return {"status": self.status, "error": self.error}


# -----------------------------
# ID 형식 가드
# -----------------------------
def check_movie_id(raw: Optional[str]) -> str:
    """
    경로의 id를 정수로 해석하고 정규화된 문자열로 돌려줍니다.

    - "123" -> "123", "007" -> "7", " 42" -> "42"
    - "abc" / "" / None -> GuardRejection(400, "Invalid movie ID provided")
    """
    match = _LEADING_INT.match(raw) if raw is not None else None
    if match is not None:
        try:
            return str(int(match.group(1)))
        except ValueError:
            # 정수 변환 자릿수 한도(기본 4300자리)를 넘는 숫자열
            pass
    logger.info("rejected movie id %.40r", raw)
    raise GuardRejection(400, "Invalid movie ID provided")


def valid_movie_id(id: str = Path(..., description="Movie ID")) -> int:
    # FastAPI 의존성: 경로 파라미터를 문자열로 받아 직접 검사 (FastAPI 기본 422 대신 400)
    return int(check_movie_id(id))


# -----------------------------
# 토큰 신선도 가드
# -----------------------------
# 토큰 = 발급 시각(ISO-8601 문자열). 서명 검증은 하지 않음
def _parse_issued_at(token: str) -> Optional[datetime]:
    text = token.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        issued_at = datetime.fromisoformat(text)
    except ValueError:
        return None
    # 시간대가 없으면 UTC로 간주
    if issued_at.tzinfo is None:
        issued_at = issued_at.replace(tzinfo=timezone.utc)
    return issued_at


def check_token_freshness(
    authorization: Optional[str],
    now: Optional[datetime] = None,
    max_age_seconds: Optional[int] = None,
) -> None:
    """
    Authorization 헤더("Bearer <발급시각>")의 발급 시각이
    [now - max_age_seconds, now] 범위 안인지 확인합니다.

    - 헤더 없음 -> 401 "Unauthorized, no Authorization header."
    - 해석 불가 / 미래 시각 / 너무 오래됨 -> 401 "Unauthorized, invalid token timestamp."
    """
    if not authorization:
        logger.info("rejected request without Authorization header")
        raise GuardRejection(401, "Unauthorized, no Authorization header.")

    if max_age_seconds is None:
        max_age_seconds = settings.TOKEN_MAX_AGE_SECONDS
    if now is None:
        now = datetime.now(timezone.utc)

    issued_at = _parse_issued_at(authorization.replace("Bearer ", ""))
    if issued_at is None or not 0 <= (now - issued_at).total_seconds() <= max_age_seconds:
        logger.info("rejected token with issue timestamp %r", authorization)
        raise GuardRejection(401, "Unauthorized, invalid token timestamp.")


def require_fresh_token(authorization: Optional[str] = Header(None)) -> None:
    # FastAPI 의존성: 쓰기 엔드포인트(POST/PUT/DELETE)에 건다
    check_token_freshness(authorization)


def issue_token(now: Optional[datetime] = None) -> str:
    """현재 시각을 토큰 문자열로 발급 (예: "2024-01-01T12:00:00.000Z")"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
