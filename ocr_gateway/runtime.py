"""
서버 공통 런타임 유틸리티

- setup_logging(): config/logging.yml 로깅 설정을 불러오고, 없으면 기본 로깅으로 대체
- get_project_root(): 설정 파일 탐색 기준이 되는 프로젝트 루트 경로
"""
from __future__ import annotations

import logging
import logging.config
import os

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ocr_gateway.settings import settings

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def get_project_root() -> str:
    """프로젝트 루트의 절대 경로를 반환합니다(ocr_gateway의 상위 디렉터리)."""
    here = os.path.dirname(__file__)
    return os.path.abspath(os.path.join(here, ".."))


def _load_logging_config(cfg_path: str) -> dict:
    """로깅 YAML을 dict로 로드합니다. 파일이 없으면 빈 dict."""
    if not os.path.exists(cfg_path):
        return {}
    yaml = YAML(typ="safe")
    with open(cfg_path, "r", encoding="utf-8") as f:
        data = yaml.load(f) or {}
    return data if isinstance(data, dict) else {}


def setup_logging(config_rel_path: str = os.path.join("config", "logging.yml")) -> None:
    """로깅 설정을 초기화합니다.

    - 프로젝트 루트 기준 `config/logging.yml` 파일이 있으면 이를 로드해 로깅을 구성합니다.
      이때 `ocr_gateway` 로거 레벨은 settings.log_level로 덮어씁니다.
    - 없거나 형식이 잘못되었으면 settings.log_level 기준 기본 로깅 설정으로 대체합니다.

    Args:
        config_rel_path: 프로젝트 루트 기준 로깅 YAML 파일의 상대 경로.
    """
    cfg_path = os.path.join(get_project_root(), config_rel_path)
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    error: Exception | None = None
    try:
        data = _load_logging_config(cfg_path)
        if data:
            logging.config.dictConfig(data)
            # LOG_LEVEL이 YAML의 패키지 로거 레벨보다 우선
            logging.getLogger("ocr_gateway").setLevel(level)
            return
    except (OSError, YAMLError, ValueError, TypeError) as e:
        error = e

    logging.basicConfig(level=level, format=DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    if error is not None:
        logging.getLogger(__name__).warning(f"로깅 설정 파일을 적용하지 못했습니다 ({cfg_path}): {error}")
