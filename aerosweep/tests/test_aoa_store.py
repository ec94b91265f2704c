"""
AoA Store Tests

받음각 파일 읽기/쓰기 및 fallback 동작 테스트
"""

import logging

import pytest

from aerosweep.aoa_store import AoAReading, AoAStore, parse_aoa
from aerosweep.errors import AoAStoreError


@pytest.mark.parametrize("aoa", [-5.0, 0.0, 0.1, 2.3, -12.7, 17.9])
def test_write_read_is_exact(tmp_path, aoa):
    store = AoAStore(tmp_path / "aoa.txt")
    store.write(aoa)
    reading = store.read()
    assert reading == AoAReading.ok(aoa)
    assert store.read_aoa() == aoa


def test_first_token_only(tmp_path):
    path = tmp_path / "aoa.txt"
    path.write_text("  7.5   ignored 3.0\n")
    assert AoAStore(path).read_aoa() == 7.5


def test_missing_file_falls_back(tmp_path, caplog):
    store = AoAStore(tmp_path / "missing.txt")

    with caplog.at_level(logging.WARNING):
        first = store.read()
        second = store.read(last_known=4.0)

    assert first.value == 0.0
    assert first.stale
    assert "not found" in first.reason
    assert second.value == 4.0
    assert store.fallback_count == 2
    assert "keeping last value" in caplog.text


@pytest.mark.parametrize("content", ["", "   \n", "abc", "nan", "inf", "--3"])
def test_malformed_content_falls_back(tmp_path, content):
    path = tmp_path / "aoa.txt"
    path.write_text(content)
    reading = AoAStore(path).read(last_known=-2.0)
    assert reading.stale
    assert reading.value == -2.0
    assert reading.reason.startswith("malformed")


def test_strict_mode_raises(tmp_path):
    store = AoAStore(tmp_path / "missing.txt", strict=True)
    with pytest.raises(AoAStoreError) as exc:
        store.read()
    assert exc.value.reason == "file not found"
    assert store.fallback_count == 0


def test_recovers_after_rewrite(tmp_path):
    path = tmp_path / "aoa.txt"
    path.write_text("garbage")
    store = AoAStore(path)
    assert store.read(last_known=1.0).stale

    store.write(6.0)
    reading = store.read(last_known=1.0)
    assert not reading.stale
    assert reading.value == 6.0


def test_write_rejects_non_finite(tmp_path):
    store = AoAStore(tmp_path / "aoa.txt")
    with pytest.raises(ValueError):
        store.write(float('nan'))
    assert not store.exists()


def test_parse_aoa():
    assert parse_aoa("3\n") == 3.0
    assert parse_aoa("-1e1") == -10.0
    with pytest.raises(ValueError):
        parse_aoa("")


@pytest.mark.parametrize("raw", [b"\xff\xfe", b"\xff\xfe\x00garbage", b"\x80\x81"])
def test_non_ascii_bytes_fall_back(tmp_path, raw):
    path = tmp_path / "aoa.txt"
    path.write_bytes(raw)
    store = AoAStore(path)

    reading = store.read(last_known=3.0)

    assert reading.stale
    assert reading.value == 3.0
    assert reading.reason.startswith("malformed")
    assert store.fallback_count == 1


def test_non_ascii_bytes_raise_in_strict_mode(tmp_path):
    path = tmp_path / "aoa.txt"
    path.write_bytes(b"\xff\xfe")
    with pytest.raises(AoAStoreError):
        AoAStore(path, strict=True).read()


@pytest.mark.parametrize("content, expected", [
    ("12deg", 12.0),
    ("-4.5;", -4.5),
    ("+.5x", 0.5),
    ("3e1rad", 30.0),
    ("7e", 7.0),
])
def test_leading_number_of_token(tmp_path, content, expected):
    path = tmp_path / "aoa.txt"
    path.write_text(content)
    reading = AoAStore(path).read(last_known=-1.0)
    assert not reading.stale
    assert reading.value == expected


def test_overflowing_number_is_malformed():
    with pytest.raises(ValueError, match="non-finite"):
        parse_aoa("1e400")
