# ------------------------------------------------------------
# validation.py - 스키마 검증 헬퍼 (입력 -> 검증된 dict 또는 에러 메시지)
# ------------------------------------------------------------

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Type

from pydantic import BaseModel, ValidationError


@dataclass
class ValidationResult:
    success: bool
    data: Optional[Dict[str, Any]] = None   # 성공 시: 호출자가 실제로 보낸 필드만 담은 dict
    error: Optional[str] = None             # 실패 시: 위반 메시지를 ", "로 이어붙인 문자열


def _received(value: Any) -> str:
    # 에러 메시지에 쓰는 JSON 관점의 입력 타입 이름
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _error_message(error: Dict[str, Any]) -> str:
    """pydantic 에러 1건을 클라이언트용 메시지로 변환"""
    kind = error.get("type")
    ctx = error.get("ctx") or {}
    value = error.get("input")

    if kind == "string_too_short":
        return f"String must contain at least {ctx['min_length']} character(s)"
    if kind == "greater_than_equal":
        return f"Number must be greater than or equal to {ctx['ge']}"
    if kind == "less_than_equal":
        return f"Number must be less than or equal to {ctx['le']}"
    if kind == "finite_number":
        return "Number must be finite"
    if kind == "missing":
        return "Required"
    if kind == "string_type":
        return f"Expected string, received {_received(value)}"
    if kind in ("int_type", "int_from_float"):
        # 실수가 정수 자리에 온 경우는 "integer"로 구분
        if isinstance(value, float):
            return "Expected integer, received float"
        return f"Expected number, received {_received(value)}"
    if kind == "float_type":
        return f"Expected number, received {_received(value)}"
    if kind in ("model_type", "model_attributes_type", "dict_type"):
        return f"Expected object, received {_received(value)}"
    return error.get("msg", "Invalid input")


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """
    검증 에러 목록을 하나의 문자열로 합칩니다.

    - 순서는 pydantic이 보고한 순서 = 스키마에 필드를 선언한 순서
    - 예) 빈 name + year=1899 ->
      "String must contain at least 1 character(s), Number must be greater than or equal to 1900"
    """
    return ", ".join(_error_message(error) for error in errors)


def validate_schema(schema: Type[BaseModel], data: Any) -> ValidationResult:
    """
    schema로 data를 검증합니다. 부수효과 없는 순수 함수.

    사용법:
      result = validate_schema(CreateMovieRequest, payload)
      if not result.success:
          return {"status": 400, "error": result.error}
      repository.add_movie(result.data)
    """
    try:
        parsed = schema.model_validate(data)
    except ValidationError as exc:
        return ValidationResult(success=False, error=format_validation_errors(exc.errors()))

    # exclude_unset: 보내지 않은 선택 필드는 dict에 넣지 않음 (부분 수정의 핵심)
    return ValidationResult(success=True, data=parsed.model_dump(exclude_unset=True))
