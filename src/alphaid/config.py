"""
환경 변수로 AlphaId 설정 로드
  ALPHAID_ALPHABET    문자셋 (기본: a-z0-9A-Z-_)
  ALPHAID_MIN_LENGTH  최소 길이 (기본: 1)
  ALPHAID_BITS        정수 폭 (기본: 128)
"""

import logging
import os

from alphaid.alphabet import DEFAULT_ALPHABET
from alphaid.codec import DEFAULT_BITS, DEFAULT_MIN_LENGTH, AlphaId

logger = logging.getLogger(__name__)

ENV_ALPHABET = "ALPHAID_ALPHABET"
ENV_MIN_LENGTH = "ALPHAID_MIN_LENGTH"
ENV_BITS = "ALPHAID_BITS"


def _int_from_env(environ, name: str, default: int, minimum: int) -> int:
    raw = (environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning("%s=%r is not an integer, using %d", name, raw, default)
        return default
    if value < minimum:
        logger.warning("%s=%d is below %d, using %d", name, value, minimum, default)
        return default
    return value


def settings_from_env(environ=None) -> dict:
    """환경 변수 -> AlphaId 생성 인자 (검증은 AlphaId 생성 시점에)"""
    if environ is None:
        environ = os.environ

    return {
        "alphabet": environ.get(ENV_ALPHABET) or DEFAULT_ALPHABET,
        "min_length": _int_from_env(environ, ENV_MIN_LENGTH, DEFAULT_MIN_LENGTH, 0),
        "bits": _int_from_env(environ, ENV_BITS, DEFAULT_BITS, 1),
    }


def from_env(environ=None) -> AlphaId:
    """환경 변수 -> AlphaId. 잘못된 문자셋은 InvalidAlphabet을 그대로 올립니다."""
    return AlphaId(**settings_from_env(environ))
