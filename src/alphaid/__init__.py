"""
YouTube 스타일 짧은 ID 생성 (URL 단축용)
  encode(1350997667) -> "90F7qb"
  decode("90F7qb")   -> 1350997667
"""

from alphaid.alphabet import DEFAULT_ALPHABET, Alphabet
from alphaid.codec import AlphaId, Builder
from alphaid.errors import AlphaIdError, InvalidAlphabet, InvalidNumber, Overflow, UnknownSymbol

__all__ = [
    "DEFAULT_ALPHABET",
    "Alphabet",
    "AlphaId",
    "Builder",
    "AlphaIdError",
    "InvalidAlphabet",
    "InvalidNumber",
    "Overflow",
    "UnknownSymbol",
    "encode",
    "decode",
]

_DEFAULT = AlphaId()


def encode(num: int) -> str:
    """정수 -> 기본 설정 코드 문자열"""
    return _DEFAULT.encode_str(num)


def decode(code) -> int:
    """기본 설정 코드 문자열 -> 정수"""
    return _DEFAULT.decode(code)
