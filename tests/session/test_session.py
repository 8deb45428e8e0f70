"""Tests for ConverterSession preview and save policies."""

from __future__ import annotations

import pytest

from thermoconv.errors import InvalidInputError
from thermoconv.history import HistoryBuffer
from thermoconv.models.config import AppSettings
from thermoconv.models.units import TemperatureUnit
from thermoconv.session import ConverterSession


class TestPreview:
    def test_defaults_celsius_to_fahrenheit(self) -> None:
        session = ConverterSession()
        assert session.from_unit is TemperatureUnit.CELSIUS
        assert session.to_unit is TemperatureUnit.FAHRENHEIT
        assert session.decimal_places == 2

    def test_empty_input_previews_zero_converted(self) -> None:
        session = ConverterSession()
        assert session.preview == "32.00"
        assert session.preview_label == "32.00 °F"

    def test_invalid_input_previews_zero(self) -> None:
        session = ConverterSession(input_text="abc")
        assert session.preview == "0"

    def test_follows_units_and_precision(self) -> None:
        session = ConverterSession(input_text="98.765", to_unit=TemperatureUnit.CELSIUS)
        session.from_unit = TemperatureUnit.CELSIUS
        assert session.preview == "98.77"
        session.set_decimal_places(0)
        assert session.preview == "99"
        session.to_unit = TemperatureUnit.KELVIN
        assert session.preview_label == "372 K"

    def test_can_save_only_with_text(self) -> None:
        session = ConverterSession()
        assert not session.can_save
        session.input_text = "x"
        assert session.can_save

    def test_input_is_valid(self) -> None:
        assert ConverterSession(input_text="-5.5").input_is_valid
        assert not ConverterSession(input_text="5e3").input_is_valid


class TestSave:
    def test_adds_formatted_record(self) -> None:
        session = ConverterSession(
            input_text="212",
            from_unit=TemperatureUnit.FAHRENHEIT,
            to_unit=TemperatureUnit.CELSIUS,
            decimal_places=1,
        )
        record = session.save()

        assert record.input_value == "212"
        assert record.result == "100.0"
        assert session.history.records == (record,)

    def test_invalid_input_raises_and_leaves_history(self) -> None:
        session = ConverterSession(input_text="hot")
        session.history.add_record(ConverterSession(input_text="1").save())

        with pytest.raises(InvalidInputError):
            session.save()
        assert len(session.history) == 1

    def test_empty_input_raises(self) -> None:
        with pytest.raises(InvalidInputError):
            ConverterSession().save()

    def test_history_is_bounded(self) -> None:
        session = ConverterSession()
        for n in range(12):
            session.input_text = str(n)
            session.save()
        assert len(session.history) == 10
        assert session.history.records[0].input_value == "11"


class TestUnitsAndPrecision:
    def test_swap_units(self) -> None:
        session = ConverterSession()
        session.swap_units()
        assert session.from_unit is TemperatureUnit.FAHRENHEIT
        assert session.to_unit is TemperatureUnit.CELSIUS

    @pytest.mark.parametrize("places", [-1, 5])
    def test_precision_out_of_range(self, places: int) -> None:
        session = ConverterSession()
        with pytest.raises(ValueError, match="between 0 and 4"):
            session.set_decimal_places(places)
        assert session.decimal_places == 2

    def test_from_settings(self) -> None:
        settings = AppSettings(
            from_unit=TemperatureUnit.KELVIN,
            to_unit=TemperatureUnit.CELSIUS,
            decimal_places=3,
            history_size=4,
        )
        session = ConverterSession.from_settings(settings)
        assert session.from_unit is TemperatureUnit.KELVIN
        assert session.to_unit is TemperatureUnit.CELSIUS
        assert session.decimal_places == 3
        assert isinstance(session.history, HistoryBuffer)
        assert session.history.capacity == 4
