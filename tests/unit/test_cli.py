"""
alphaid 명령줄 도구 검증
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "src"))
from alphaid.cli import main


def test_encode_command(capsys):
    assert main(["encode", "0", "1", "1350997667"]) == 0
    assert capsys.readouterr().out.split() == ["a", "b", "90F7qb"]


def test_decode_command(capsys):
    assert main(["decode", "90F7qb", "ab"]) == 0
    assert capsys.readouterr().out.split() == ["1350997667", "64"]


def test_options(capsys):
    assert main(["--min-length", "2", "--alphabet", "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "encode", "0"]) == 0
    assert capsys.readouterr().out.strip() == "AB"


def test_env_is_used_as_default(monkeypatch, capsys):
    monkeypatch.setenv("ALPHAID_MIN_LENGTH", "5")
    assert main(["encode", "0"]) == 0
    assert capsys.readouterr().out.strip() == "aaaab"

    # 명령줄 옵션이 우선
    assert main(["--min-length", "1", "encode", "0"]) == 0
    assert capsys.readouterr().out.strip() == "a"


def test_errors_exit_with_1(capsys):
    assert main(["decode", "b!"]) == 1
    assert "오류" in capsys.readouterr().err

    assert main(["--bits", "8", "encode", "256"]) == 1
    assert main(["--alphabet", "aa", "encode", "1"]) == 1
    assert main(["--bits", "8", "decode", "aae"]) == 1


def test_option_overrides_invalid_env_alphabet(monkeypatch, capsys):
    """환경 변수 문자셋이 잘못되어도 --alphabet 이 있으면 사용하지 않음"""
    monkeypatch.setenv("ALPHAID_ALPHABET", "aab")
    assert main(["--alphabet", "xyz", "encode", "1"]) == 0
    assert capsys.readouterr().out.strip() == "y"

    # 옵션이 없으면 환경 변수 문자셋 오류가 그대로 보고됨
    assert main(["encode", "1"]) == 1
    assert "duplicate" in capsys.readouterr().err
