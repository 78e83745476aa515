"""
AlphaId 인코딩/디코딩 (YouTube 스타일 짧은 ID)

정수를 문자셋 크기(B)를 진법으로 하는 little-endian 숫자열로 바꿉니다.
  AlphaId().encode_str(1350997667) -> "90F7qb"

최소 길이(min_length = L, L >= 2) 규칙:
  - 하위 L-1 자리는 value % B**(L-1) 를 그대로 0으로 채워 기록
  - 그 뒤에 marker = value // B**(L-1) + 1 을 최소 자리수로 기록
  marker는 항상 1 이상이므로 결과 길이는 L 이상이고, 디코딩 시
  marker - 1 로 원래 상위 값을 복원합니다.
  AlphaId(min_length=5).encode_str(0) -> "aaaab"
"""

import logging
import operator

from alphaid.alphabet import DEFAULT_ALPHABET, Alphabet, to_bytes
from alphaid.errors import InvalidNumber, Overflow, UnknownSymbol

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 1
DEFAULT_BITS = 128


class AlphaId:
    """인코딩/디코딩 설정. 생성 후에는 변경되지 않으며 여러 호출에서 공유 가능."""

    __slots__ = ("_alphabet", "_base", "_min_length", "_bits", "_max_value", "_max_length")

    def __init__(self, alphabet=DEFAULT_ALPHABET, min_length: int = DEFAULT_MIN_LENGTH,
                 bits: int = DEFAULT_BITS):
        _check_min_length(min_length)
        _check_bits(bits)
        if not isinstance(alphabet, Alphabet):
            alphabet = Alphabet(alphabet)

        self._alphabet = alphabet
        self._base = len(alphabet)
        self._min_length = min_length
        self._bits = bits
        self._max_value = (1 << bits) - 1
        self._max_length = len(self._digits(self._max_value))

        logger.debug(
            "AlphaId built: base=%d min_length=%d bits=%d",
            self._base, min_length, bits,
        )

    @classmethod
    def builder(cls) -> "Builder":
        return Builder()

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def base(self) -> int:
        return self._base

    @property
    def min_length(self) -> int:
        return self._min_length

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def max_value(self) -> int:
        return self._max_value

    @property
    def max_length(self) -> int:
        """가장 긴 정규(canonical) 코드의 길이"""
        return self._max_length

    # --- 인코딩 ---

    def encode(self, value) -> bytes:
        """정수 -> 코드 (bytes)"""
        if isinstance(value, bool):
            raise InvalidNumber("expected an integer, got bool")
        try:
            value = operator.index(value)
        except TypeError:
            raise InvalidNumber(f"expected an integer, got {type(value).__name__}") from None
        if value < 0 or value > self._max_value:
            raise InvalidNumber(f"{value} is outside 0..{self._max_value}")

        symbol_at = self._alphabet.symbol_at
        return bytes(symbol_at(d) for d in self._digits(value))

    def encode_str(self, value) -> str:
        """정수 -> 코드 (str, URL 등에 바로 사용)"""
        return self.encode(value).decode("latin-1")

    def _digits(self, value: int) -> list:
        # 최하위 자리부터
        digits = []
        if self._min_length > 1:
            for _ in range(self._min_length - 1):
                value, digit = divmod(value, self._base)
                digits.append(digit)
            value += 1

        while True:
            value, digit = divmod(value, self._base)
            digits.append(digit)
            if value == 0:
                return digits

    # --- 디코딩 ---

    def decode(self, code) -> int:
        """코드 (bytes 또는 str) -> 정수"""
        digits = self._indices(code)
        if not digits:
            raise InvalidNumber("cannot decode an empty code")

        if self._min_length <= 1:
            return self._accumulate(digits, self._max_value)

        low_width = self._min_length - 1
        if len(digits) < self._min_length:
            raise InvalidNumber(
                f"code is shorter than the minimum length {self._min_length}"
            )

        scale = self._base ** low_width
        marker = self._accumulate(digits[low_width:], self._max_value // scale + 1)
        if marker == 0:
            raise InvalidNumber("padded code has no marker digit")

        value = (marker - 1) * scale + self._accumulate(digits[:low_width])
        if value > self._max_value:
            raise Overflow(self._max_value)
        return value

    def _indices(self, code) -> list:
        if isinstance(code, str):
            for position, char in enumerate(code):
                if ord(char) > 0xFF:
                    raise UnknownSymbol(char, position)
        index_of = self._alphabet.index_of
        return [index_of(symbol, position) for position, symbol in enumerate(to_bytes(code))]

    def _accumulate(self, digits: list, limit=None) -> int:
        # 최상위 자리부터 누적, limit 초과 시 즉시 중단
        value = 0
        for digit in reversed(digits):
            value = value * self._base + digit
            if limit is not None and value > limit:
                raise Overflow(self._max_value)
        return value

    def __repr__(self) -> str:
        return (
            f"AlphaId(alphabet={self._alphabet.symbols.decode('latin-1')!r}, "
            f"min_length={self._min_length}, bits={self._bits})"
        )


class Builder:
    """
    AlphaId 빌더
      AlphaId.builder().min_length(2).alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZ").build()
    문자셋 검증은 build() 시점에 한 번만 수행합니다.
    """

    def __init__(self):
        self._alphabet = DEFAULT_ALPHABET
        self._min_length = DEFAULT_MIN_LENGTH
        self._bits = DEFAULT_BITS

    def alphabet(self, symbols) -> "Builder":
        self._alphabet = symbols
        return self

    def min_length(self, length: int) -> "Builder":
        _check_min_length(length)
        self._min_length = length
        return self

    pad = min_length

    def bits(self, bits: int) -> "Builder":
        _check_bits(bits)
        self._bits = bits
        return self

    def build(self) -> AlphaId:
        return AlphaId(self._alphabet, self._min_length, self._bits)


def _check_min_length(length):
    if not isinstance(length, int) or isinstance(length, bool) or length < 0:
        raise ValueError(f"min_length must be a non-negative integer, got {length!r}")


def _check_bits(bits):
    if not isinstance(bits, int) or isinstance(bits, bool) or bits < 1:
        raise ValueError(f"bits must be a positive integer, got {bits!r}")
