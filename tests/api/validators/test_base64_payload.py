"""Testes da decodificação de campos base64."""

from __future__ import annotations

import pytest

from api.validators import decode_base64_field, strip_data_url
from app.errors import ClientInputError


def test_plain_base64() -> None:
    assert decode_base64_field("aGVsbG8=", "data") == b"hello"


def test_data_url_prefix_is_removed() -> None:
    assert decode_base64_field("data:text/plain;base64,aGVsbG8=", "data") == b"hello"


def test_whitespace_inside_payload_is_ignored() -> None:
    assert decode_base64_field("aGVs\nbG8=", "data") == b"hello"


def test_strip_data_url_returns_mime() -> None:
    assert strip_data_url("data:image/png;base64,AAAA") == ("AAAA", "image/png")
    assert strip_data_url("AAAA") == ("AAAA", None)


@pytest.mark.parametrize("value", [None, "", 123])
def test_missing_value(value: object) -> None:
    with pytest.raises(ClientInputError, match=r"image \(base64\) required"):
        decode_base64_field(value, "image")


def test_invalid_base64() -> None:
    with pytest.raises(ClientInputError, match="not valid base64"):
        decode_base64_field("not*base64!", "data")
