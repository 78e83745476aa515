"""
문자셋(Alphabet) 테이블
인덱스 -> 문자, 문자 -> 인덱스 조회를 O(1)로 제공
"""

from alphaid.errors import InvalidAlphabet, UnknownSymbol

# a-z, 0-9, A-Z, -, _ (64자)
DEFAULT_ALPHABET = b"abcdefghijklmnopqrstuvwxyz0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ-_"


def to_bytes(value) -> bytes:
    """str은 latin-1로 변환 (문자 1개 = 1바이트)"""
    if isinstance(value, str):
        return value.encode("latin-1")
    return bytes(value)


def _symbol_value(symbol):
    """바이트 값(int), 한 글자 str, 한 글자 bytes -> 바이트 값. 그 외는 None."""
    if isinstance(symbol, str):
        if len(symbol) == 1 and ord(symbol) <= 0xFF:
            return ord(symbol)
        return None
    if isinstance(symbol, (bytes, bytearray)):
        return symbol[0] if len(symbol) == 1 else None
    if isinstance(symbol, int) and not isinstance(symbol, bool):
        return symbol
    return None


def _display(symbol):
    # UnknownSymbol 메시지용
    if isinstance(symbol, str):
        return symbol
    if isinstance(symbol, (bytes, bytearray)):
        return bytes(symbol).decode("latin-1")
    if isinstance(symbol, int) and 0 <= symbol <= 0xFF:
        return chr(symbol)
    return repr(symbol)


class Alphabet:
    """중복 없는 바이트 문자들의 순서 있는 집합."""

    __slots__ = ("_symbols", "_index")

    def __init__(self, symbols=DEFAULT_ALPHABET):
        try:
            symbols = to_bytes(symbols)
        except UnicodeEncodeError:
            raise InvalidAlphabet("alphabet symbols must be single bytes (latin-1)") from None
        if len(symbols) < 2:
            raise InvalidAlphabet("alphabet needs at least 2 symbols")

        index = {}
        for i, symbol in enumerate(symbols):
            if symbol in index:
                raise InvalidAlphabet(
                    f"duplicate symbol {chr(symbol)!r} in alphabet"
                )
            index[symbol] = i

        self._symbols = symbols
        self._index = index

    @property
    def symbols(self) -> bytes:
        return self._symbols

    def symbol_at(self, index: int) -> int:
        return self._symbols[index]

    def index_of(self, symbol, position=None) -> int:
        """문자 -> 인덱스. 없는 문자면 UnknownSymbol."""
        index = self._index.get(_symbol_value(symbol))
        if index is None:
            raise UnknownSymbol(_display(symbol), position)
        return index

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol) -> bool:
        return _symbol_value(symbol) in self._index

    def __eq__(self, other) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({self._symbols.decode('latin-1')!r})"
