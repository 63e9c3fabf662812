# ---------------------------------------------
# auth.py - 테스트/개발용 토큰 발급 엔드포인트
# ---------------------------------------------

from fastapi import APIRouter

from ..guards import issue_token
from ..schemas import TokenResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/fake-token", response_model=TokenResponse)
def fake_token():
    """
    현재 시각을 담은 토큰을 발급합니다.
    - 서명 없는 "발급 시각" 토큰이므로 실제 인증 수단이 아님
    - Authorization: Bearer <token> 헤더로 보내면 1시간 동안 유효
    """
    return {"token": issue_token()}
