"""
Tests for frontend/utils/validation.py - Configuration form rules.

The form must reject exactly what the API rejects, so these tests also
check that constants and verdicts agree with the backend validator.
"""
import pytest

from frontend.utils.validation import (
    INSTRUMENTS,
    TIMEFRAMES,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    NOTES_MAX_LENGTH,
    config_to_form_values,
    form_values_to_payload,
    get_initial_form_values,
    validate_config_form,
)


class TestValidateConfigForm:

    def test_filled_form_is_valid(self, sample_form_values):
        errors, is_valid = validate_config_form(sample_form_values)

        assert errors == {}
        assert is_valid is True

    def test_blank_form_reports_required_fields(self):
        errors, is_valid = validate_config_form(get_initial_form_values())

        assert is_valid is False
        assert set(errors) == {
            "name",
            "instrument",
            "timeframe",
            "entryThreshold",
            "exitThreshold",
            "maxLossPercent",
            "maxTradesPerDay",
        }
        assert errors["instrument"] == "Please select a valid instrument."
        assert errors["timeframe"] == "Please select a valid timeframe."

    @pytest.mark.parametrize("name,ok", [("ab", False), ("abc", True), ("  ab ", False), ("x" * 61, False)])
    def test_name_length(self, sample_form_values, name, ok):
        errors, _ = validate_config_form({**sample_form_values, "name": name})
        assert ("name" not in errors) is ok

    @pytest.mark.parametrize("value,ok", [("0", False), ("0.01", True), ("100", True), ("100.5", False), ("x", False)])
    def test_max_loss_range(self, sample_form_values, value, ok):
        errors, _ = validate_config_form({**sample_form_values, "maxLossPercent": value})
        assert ("maxLossPercent" not in errors) is ok

    @pytest.mark.parametrize("value,ok", [("1", True), ("0", False), ("2.5", False), ("-1", False), ("", False)])
    def test_max_trades_whole_positive(self, sample_form_values, value, ok):
        errors, _ = validate_config_form({**sample_form_values, "maxTradesPerDay": value})
        assert ("maxTradesPerDay" not in errors) is ok

    def test_thresholds_may_be_negative(self, sample_form_values):
        errors, _ = validate_config_form({**sample_form_values, "entryThreshold": "-2", "exitThreshold": "-0.1"})
        assert errors == {}

    def test_notes_limit(self, sample_form_values):
        errors, _ = validate_config_form({**sample_form_values, "notes": "n" * 501})
        assert "notes" in errors


class TestFormConversions:

    def test_form_values_to_payload(self, sample_form_values):
        payload = form_values_to_payload(sample_form_values)

        assert payload == {
            "name": "NIFTY Momentum",
            "instrument": "NIFTY",
            "timeframe": "5m",
            "entryThreshold": 0.85,
            "exitThreshold": 0.4,
            "maxLossPercent": 2.5,
            "maxTradesPerDay": 10,
            "enabled": True,
            "stopLossEnabled": False,
            "notes": "",
        }
        assert isinstance(payload["maxTradesPerDay"], int)

    def test_config_to_form_values_round_trips(self, sample_config):
        values = config_to_form_values(sample_config)

        assert values["maxLossPercent"] == "2.5"
        assert validate_config_form(values) == ({}, True)
        payload = form_values_to_payload(values)
        for key, value in payload.items():
            assert sample_config[key] == value


class TestBackendParity:

    def test_constants_match_backend(self):
        from app.services import validation as backend

        assert tuple(INSTRUMENTS) == backend.INSTRUMENTS
        assert tuple(TIMEFRAMES) == backend.TIMEFRAMES
        assert NAME_MIN_LENGTH == backend.NAME_MIN_LENGTH
        assert NAME_MAX_LENGTH == backend.NAME_MAX_LENGTH
        assert NOTES_MAX_LENGTH == backend.NOTES_MAX_LENGTH

    @pytest.mark.parametrize("overrides", [
        {},
        {"name": "ab"},
        {"instrument": "BTC"},
        {"timeframe": "1d"},
        {"entryThreshold": "abc"},
        {"maxLossPercent": "0"},
        {"maxLossPercent": "150"},
        {"maxTradesPerDay": "1.5"},
        {"notes": "n" * 501},
    ])
    def test_same_fields_rejected_as_backend(self, sample_form_values, overrides):
        from app.services.validation import validate_config

        values = {**sample_form_values, **overrides}
        client_errors, _ = validate_config_form(values)
        server_errors = validate_config(values)

        assert set(client_errors) == set(server_errors)
