"""Testes da tradução de campos Compulife e da injeção de credenciais."""

from __future__ import annotations

import json
from urllib.parse import parse_qs, unquote, urlsplit

import pytest

from api.connectors.compulife import (
    ACTION_FIELDS,
    CREDENTIAL_FIELDS,
    attach_credentials,
    build_private_url,
    full_whitelist,
    translate,
)
from api.connectors.compulife.fields import (
    HEALTH_ANALYZER_ACTION,
    QUOTE_ACTION,
    QUOTE_REQUIRED_FIELDS,
)
from api.connectors.compulife.params import stringify
from config.settings import CompulifeSettings

QUOTE_INPUT = {
    "State": "MS",
    "BirthMonth": "6",
    "Birthday": "15",
    "BirthYear": "1967",
    "Sex": "M",
    "Smoker": "N",
    "Health": "PP",
    "NewCategory": "5",
    "FaceAmount": "250000",
    "ModeUsed": "M",
}


class TestTranslate:
    def test_copies_only_whitelisted_fields(self) -> None:
        inbound = {**QUOTE_INPUT, "action": "quote-compare", "Evil": "x", "password": "p"}

        params = translate(QUOTE_ACTION, inbound)

        whitelist = set(full_whitelist(QUOTE_ACTION))
        assert set(params) - set(ACTION_FIELDS[QUOTE_ACTION].defaults) == set(inbound) & whitelist
        assert "Evil" not in params
        assert "action" not in params

    def test_empty_input_yields_only_defaults(self) -> None:
        assert translate(QUOTE_ACTION, {}) == {
            "SortOverride1": "A",
            "CompRating": "4",
            "LANGUAGE": "E",
        }

    def test_inbound_value_wins_over_default(self) -> None:
        params = translate(QUOTE_ACTION, {"SortOverride1": "Z"})
        assert params["SortOverride1"] == "Z"
        assert params["CompRating"] == "4"

    def test_present_but_empty_value_is_not_defaulted(self) -> None:
        assert translate(QUOTE_ACTION, {"CompRating": ""})["CompRating"] == ""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("MS", "MS"), (250000, "250000"), (True, "true"), (None, "null"), (1.5, "1.5")],
    )
    def test_values_are_stringified(self, value: object, expected: str) -> None:
        assert translate(QUOTE_ACTION, {"FaceAmount": value})["FaceAmount"] == expected

    def test_missing_required_fields_are_omitted(self) -> None:
        params = translate(QUOTE_ACTION, {"State": "TX"})
        assert "BirthYear" not in params
        assert params["State"] == "TX"

    def test_health_analyzer_is_superset_of_quote(self) -> None:
        inbound = {**QUOTE_INPUT, "Weight": 180, "Height": "510", "DoHeightWeight": "ON"}

        base = translate(QUOTE_ACTION, inbound)
        composed = translate(HEALTH_ANALYZER_ACTION, inbound)

        for key, value in base.items():
            assert composed[key] == value
        assert composed["Weight"] == "180"
        assert composed["DoHeightWeight"] == "ON"

    def test_unknown_action_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            translate("does-not-exist", {})


class TestWhitelistTable:
    def test_credentials_never_whitelisted(self) -> None:
        for action in ACTION_FIELDS:
            assert not set(full_whitelist(action)) & set(CREDENTIAL_FIELDS)

    def test_quote_whitelist_contains_required_fields(self) -> None:
        assert set(QUOTE_REQUIRED_FIELDS) <= set(full_whitelist(QUOTE_ACTION))

    def test_health_analyzer_whitelist_extends_quote(self) -> None:
        assert set(full_whitelist(QUOTE_ACTION)) < set(full_whitelist(HEALTH_ANALYZER_ACTION))


class TestCredentials:
    def test_credentials_come_first_and_from_settings(self) -> None:
        settings = CompulifeSettings(auth_id="SERVER-ID", remote_ip="1.2.3.4")
        params = attach_credentials({"State": "MS"}, settings)

        assert list(params)[:2] == ["COMPULIFEAUTHORIZATIONID", "REMOTE_IP"]
        assert params["COMPULIFEAUTHORIZATIONID"] == "SERVER-ID"
        assert params["REMOTE_IP"] == "1.2.3.4"

    def test_inbound_credentials_cannot_override(self) -> None:
        settings = CompulifeSettings(auth_id="SERVER-ID", remote_ip="1.2.3.4")
        inbound = {**QUOTE_INPUT, "COMPULIFEAUTHORIZATIONID": "stolen", "REMOTE_IP": "6.6.6.6"}

        params = attach_credentials(translate(QUOTE_ACTION, inbound), settings)

        assert params["COMPULIFEAUTHORIZATIONID"] == "SERVER-ID"
        assert params["REMOTE_IP"] == "1.2.3.4"

    def test_end_to_end_quote_has_fifteen_keys(self) -> None:
        settings = CompulifeSettings(auth_id="SERVER-ID")
        params = attach_credentials(translate(QUOTE_ACTION, QUOTE_INPUT), settings)

        assert len(params) == 15
        assert set(params) == {
            *QUOTE_INPUT,
            "SortOverride1",
            "CompRating",
            "LANGUAGE",
            "COMPULIFEAUTHORIZATIONID",
            "REMOTE_IP",
        }


def test_build_private_url_embeds_encoded_json() -> None:
    envelope = {"COMPULIFEAUTHORIZATIONID": "ID", "State": "New York", "Name": "O'Neil & Co"}

    url = build_private_url("https://api.example.com/api", "/sidebyside", envelope)

    parts = urlsplit(url)
    assert parts.path == "/api/sidebyside/"
    assert " " not in parts.query
    assert "&Co" not in parts.query
    decoded = json.loads(parse_qs(parts.query)["COMPULIFE"][0])
    assert decoded == envelope
    assert "'" in unquote(parts.query)


def test_stringify_keeps_strings_untouched() -> None:
    assert stringify("ação") == "ação"
    assert stringify({"a": 1}) == '{"a":1}'
