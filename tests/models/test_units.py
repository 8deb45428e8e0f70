from __future__ import annotations

import pytest

from thermoconv.models.units import TemperatureUnit


class TestTemperatureUnit:
    def test_members_in_display_order(self) -> None:
        assert [u.value for u in TemperatureUnit] == ["Celsius", "Fahrenheit", "Kelvin"]

    def test_abbreviations(self) -> None:
        assert TemperatureUnit.CELSIUS.abbreviation == "°C"
        assert TemperatureUnit.FAHRENHEIT.abbreviation == "°F"
        assert TemperatureUnit.KELVIN.abbreviation == "K"

    def test_id_is_display_name(self) -> None:
        assert TemperatureUnit.KELVIN.id == "Kelvin"

    def test_is_a_string(self) -> None:
        assert TemperatureUnit.CELSIUS == "Celsius"
        assert f"{TemperatureUnit.FAHRENHEIT}" == "Fahrenheit"


class TestParse:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("c", TemperatureUnit.CELSIUS),
            ("C", TemperatureUnit.CELSIUS),
            ("celsius", TemperatureUnit.CELSIUS),
            ("°C", TemperatureUnit.CELSIUS),
            ("F", TemperatureUnit.FAHRENHEIT),
            ("Fahrenheit", TemperatureUnit.FAHRENHEIT),
            ("°f", TemperatureUnit.FAHRENHEIT),
            ("k", TemperatureUnit.KELVIN),
            (" KELVIN ", TemperatureUnit.KELVIN),
        ],
    )
    def test_accepted_spellings(self, text: str, expected: TemperatureUnit) -> None:
        assert TemperatureUnit.parse(text) is expected

    @pytest.mark.parametrize("text", ["", "x", "rankine", "cel"])
    def test_unknown_unit_raises(self, text: str) -> None:
        with pytest.raises(ValueError, match="Unknown temperature unit"):
            TemperatureUnit.parse(text)
