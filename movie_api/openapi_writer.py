# ------------------------------------------------------------
# openapi_writer.py - OpenAPI 문서를 파일로 내보내기 (JSON / YAML)
# ------------------------------------------------------------
# FastAPI가 schemas.py의 pydantic 모델로 생성한 문서를
# 정적 파일(openapi.json, openapi.yaml)로 저장. 외부 도구/클라이언트 생성기에 넘길 때 사용
#
#   python -m movie_api.openapi_writer          -> ./openapi.json, ./openapi.yaml
#   python -m movie_api.openapi_writer docs     -> docs/openapi.json, docs/openapi.yaml

import json
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

import yaml

logger = logging.getLogger(__name__)


def write_openapi(output_dir: str = ".", app=None) -> Dict[str, Path]:
    if app is None:
        from .main import app

    document = app.openapi()
    target_dir = Path(output_dir)
    target_dir.mkdir(parents=True, exist_ok=True)

    yaml_path = target_dir / "openapi.yaml"
    yaml_path.write_text(yaml.safe_dump(document, sort_keys=False, allow_unicode=True), encoding="utf-8")
    logger.info("OpenAPI generated in YAML format: %s", yaml_path)

    json_path = target_dir / "openapi.json"
    json_path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("OpenAPI generated in JSON format: %s", json_path)

    return {"json": json_path, "yaml": yaml_path}


def main(argv: Optional[list] = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    write_openapi(argv[0] if argv else ".")


if __name__ == "__main__":
    main()
