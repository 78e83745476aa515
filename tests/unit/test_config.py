"""
빌더 / 환경 변수 설정 검증
"""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "src"))
from alphaid import AlphaId, Builder, InvalidAlphabet
from alphaid.config import from_env, settings_from_env


def test_builder_defaults():
    codec = Builder().build()
    assert codec.base == 64
    assert codec.min_length == 1
    assert codec.bits == 128
    assert codec.max_value == 2 ** 128 - 1


def test_builder_chaining():
    codec = AlphaId.builder().alphabet("0123456789").min_length(4).bits(32).build()
    assert codec.base == 10
    assert codec.min_length == 4
    assert codec.bits == 32
    assert codec.encode_str(7) == "7001"


def test_builder_rejects_bad_values():
    with pytest.raises(ValueError):
        AlphaId.builder().min_length(-1)
    with pytest.raises(ValueError):
        AlphaId.builder().bits(0)
    with pytest.raises(ValueError):
        AlphaId(min_length="2")


def test_repr():
    assert repr(AlphaId(alphabet="ab", min_length=2, bits=8)) == (
        "AlphaId(alphabet='ab', min_length=2, bits=8)"
    )


def test_from_env_defaults():
    codec = from_env({})
    assert codec.encode_str(1350997667) == "90F7qb"
    assert codec.min_length == 1
    assert codec.bits == 128


def test_from_env_values():
    codec = from_env({
        "ALPHAID_ALPHABET": "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
        "ALPHAID_MIN_LENGTH": "2",
        "ALPHAID_BITS": "64",
    })
    assert codec.encode_str(0) == "AB"
    assert codec.bits == 64


def test_from_env_bad_integers_fall_back(caplog):
    codec = from_env({"ALPHAID_MIN_LENGTH": "five", "ALPHAID_BITS": "-3"})
    assert codec.min_length == 1
    assert codec.bits == 128
    assert "ALPHAID_MIN_LENGTH" in caplog.text
    assert "ALPHAID_BITS" in caplog.text


def test_from_env_bad_alphabet_raises():
    with pytest.raises(InvalidAlphabet):
        from_env({"ALPHAID_ALPHABET": "aab"})


def test_from_env_reads_os_environ(monkeypatch):
    monkeypatch.setenv("ALPHAID_MIN_LENGTH", "5")
    assert from_env().encode_str(0) == "aaaab"


def test_settings_from_env_does_not_validate():
    settings = settings_from_env({"ALPHAID_ALPHABET": "aab", "ALPHAID_MIN_LENGTH": "3"})
    assert settings == {"alphabet": "aab", "min_length": 3, "bits": 128}
