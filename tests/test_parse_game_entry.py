"""Tests for turning submitted values into a validated game entry."""

import pytest

from parse_game_entry import GameValidationError, parse_game_entry, parse_result, validate_game_entry


class TestParseResult:
    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_means_did_not_play(self, raw):
        assert parse_result("Matt", raw) is None

    def test_numeric_strings(self):
        assert parse_result("Matt", "3") == 3
        assert parse_result("Matt", " -4 ") == -4
        assert parse_result("Matt", "2.5") == 2.5

    def test_integral_values_come_back_as_int(self):
        assert isinstance(parse_result("Matt", "3.0"), int)
        assert isinstance(parse_result("Matt", 5.0), int)

    def test_exponent_and_leading_dot(self):
        assert parse_result("Matt", "1e1") == 10
        assert parse_result("Matt", "-.5") == -0.5
        assert parse_result("Matt", "+2") == 2

    @pytest.mark.parametrize("raw", ["abc", "nan", "inf", "1_000", "0x10", "1e999", True, [1]])
    def test_rejects_non_numbers(self, raw):
        with pytest.raises(GameValidationError, match="Matt"):
            parse_result("Matt", raw)

    def test_rejects_integer_too_large_for_float(self):
        with pytest.raises(GameValidationError, match="out of range"):
            parse_result("Matt", 10 ** 400)


class TestParseGameEntry:
    def test_every_player_present(self):
        entry = parse_game_entry({"Matt": "3", "Seth": "-3", "Mack": ""})

        assert entry == {"Matt": 3, "Seth": -3, "Mack": None, "Arnav": None, "Henry": None}

    def test_ignores_unknown_fields(self):
        entry = parse_game_entry({"Matt": 2, "Seth": -2, "Bob": 10, "id": 99})

        assert "Bob" not in entry
        assert "id" not in entry


class TestValidateGameEntry:
    def test_zero_sum_game_passes(self):
        validate_game_entry({"Matt": 4, "Seth": 4, "Mack": -4, "Arnav": -4, "Henry": None})

    def test_zero_sum_within_tolerance(self):
        validate_game_entry({"Matt": 1.005, "Seth": -1, "Mack": None, "Arnav": None, "Henry": None})

    def test_needs_two_players(self):
        with pytest.raises(GameValidationError, match="At least 2 players"):
            validate_game_entry({"Matt": 0, "Seth": None, "Mack": None, "Arnav": None, "Henry": None})

    def test_reports_positive_imbalance(self):
        with pytest.raises(GameValidationError, match=r"currently \+2\)"):
            validate_game_entry({"Matt": 5, "Seth": -3, "Mack": None, "Arnav": None, "Henry": None})

    def test_reports_negative_imbalance(self):
        with pytest.raises(GameValidationError, match=r"currently -1\.5\)"):
            validate_game_entry({"Matt": 2, "Seth": -3.5, "Mack": None, "Arnav": None, "Henry": None})
