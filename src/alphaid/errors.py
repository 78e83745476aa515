"""
AlphaId 예외 정의
모든 예외는 AlphaIdError(ValueError)를 상속합니다.
"""


class AlphaIdError(ValueError):
    """AlphaId 인코딩/디코딩 관련 예외의 기본 클래스"""


class InvalidAlphabet(AlphaIdError):
    """문자셋에 중복 문자가 있거나 2자 미만일 때"""


class UnknownSymbol(AlphaIdError):
    """디코딩 입력에 문자셋에 없는 문자가 포함되었을 때"""

    def __init__(self, symbol, position=None):
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"unexpected symbol {symbol!r}{where}")


class Overflow(AlphaIdError):
    """디코딩 결과가 정수 폭(bits)의 최대값을 넘을 때"""

    def __init__(self, max_value: int):
        self.max_value = max_value
        super().__init__(f"decoded value exceeds {max_value}")


class InvalidNumber(AlphaIdError):
    """인코딩할 수 없는 정수, 또는 패딩 규칙에 맞지 않는 코드"""
