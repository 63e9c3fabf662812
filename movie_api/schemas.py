from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional, List, Union

# ------------------------------------------------------------
# 요청 스키마
# ------------------------------------------------------------
# - strict=True: "2010" 같은 문자열을 숫자로, true를 숫자로 자동 변환하지 않음
#   (정수 자리에 2010.5 같은 실수는 거부, 2010.0처럼 소수부가 0이면 정수로 받음.
#    실수 자리에 정수는 허용)
# - rating은 유한한 수만 허용 (NaN / Infinity 거부)
# - 선언된 필드 순서가 곧 검증 에러 메시지의 순서
# - 정의되지 않은 키는 무시


def _whole_float_to_int(value: Any) -> Any:
    # JSON의 2010.0은 정수 2010과 같은 값으로 취급. 나머지는 strict 검증에 맡김
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class CreateMovieRequest(BaseModel):
    # 영화 생성 요청 바디(JSON). id는 선택, 나머지는 필수
    # - 선택 필드도 null은 거부 (보내지 않거나 정수여야 함)
    id: int = Field(None, description="Movie ID", examples=[1])
    name: str = Field(..., min_length=1, description="Movie name", examples=["Inception"])
    year: int = Field(..., ge=1900, le=2024, description="Release year", examples=[2010])
    rating: float = Field(..., allow_inf_nan=False, description="Movie rating", examples=[8.56])

    @field_validator("id", "year", mode="before")
    @classmethod
    def whole_float_to_int(cls, value: Any) -> Any:
        return _whole_float_to_int(value)

    class Config:
        strict = True


class UpdateMovieRequest(BaseModel):
    # 영화 부분 수정 요청 바디. 모든 필드 선택
    # - 기본값 None은 "보내지 않음"을 의미. 명시적인 null은 타입 에러로 거부
    # - 보낸 필드만 수정하도록 서비스에서 exclude_unset으로 꺼냄
    id: int = Field(None, description="Movie ID (ignored, path id wins)", examples=[1])
    name: str = Field(None, min_length=1, description="Movie name", examples=["Inception"])
    year: int = Field(None, ge=1900, le=2024, description="Release year", examples=[2010])
    rating: float = Field(None, allow_inf_nan=False, description="Rating", examples=[7.5])

    @field_validator("id", "year", mode="before")
    @classmethod
    def whole_float_to_int(cls, value: Any) -> Any:
        return _whole_float_to_int(value)

    class Config:
        strict = True


# ------------------------------------------------------------
# MovieOut: 클라이언트로 내보낼 "영화" 데이터의 응답 스키마
# ------------------------------------------------------------
class MovieOut(BaseModel):
    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Inception"])
    year: int = Field(..., examples=[2010])
    rating: float = Field(..., examples=[8.56])

    class Config:
        # ORM 객체(SQLAlchemy 모델)로부터 필드 맵핑 허용
        from_attributes = True


# ------------------------------------------------------------
# 응답 봉투(envelope) 스키마 - OpenAPI 문서화 용도
# ------------------------------------------------------------
# 실제 응답은 어댑터/서비스가 만든 dict를 그대로 JSON으로 내보냄.
# 아래 모델은 Swagger 문서에 응답 형태를 보여주기 위한 것이므로
# 어댑터의 dict 구조를 바꾸면 여기도 손으로 맞춰야 함


class GetMovieResponse(BaseModel):
    status: int = Field(..., examples=[200])
    data: Union[MovieOut, List[MovieOut], None] = Field(
        None, description="Movie details, list of movies, or null if not found"
    )
    error: Optional[str] = Field(None, description="Error message if an error occurred", examples=[None])


class CreateMovieResponse(BaseModel):
    status: int = Field(..., examples=[200])
    data: MovieOut
    error: Optional[str] = Field(None, description="Error message, if any")


class UpdatedMovieResponse(BaseModel):
    status: int = Field(..., examples=[200])
    data: MovieOut
    error: Optional[str] = Field(None, description="Error message, if any")


class ConflictMovieResponse(BaseModel):
    status: int = Field(..., examples=[409])
    error: str = Field(..., examples=["Movie Inception already exists"])


class MovieNotFoundResponse(BaseModel):
    status: int = Field(..., examples=[404])
    data: None = None
    error: str = Field(..., examples=["Movie with id 1 not found"])


class DeleteMovieResponse(BaseModel):
    status: int = Field(..., examples=[200])
    message: str = Field(..., examples=["Movie 1 has been deleted"])


class ErrorResponse(BaseModel):
    # 400(검증/ID 형식), 401(인증), 500(서버 오류) 공용
    status: int = Field(..., examples=[400])
    error: str = Field(..., examples=["Invalid movie ID provided"])


class TokenResponse(BaseModel):
    token: str = Field(..., examples=["2024-01-01T12:00:00.000Z"])


class HealthResponse(BaseModel):
    message: str = Field(..., examples=["Server is running"])
