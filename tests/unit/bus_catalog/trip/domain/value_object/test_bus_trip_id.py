import pytest

from bus_catalog.trip.domain.value_object.bus_trip_id import BusTripId


class TestBusTripId:
    def test_valid_id(self):
        trip_id = BusTripId(value=1)
        assert trip_id.value == 1
        assert str(trip_id) == "1"

    def test_same_value_is_equal(self):
        assert BusTripId(value=7) == BusTripId(value=7)

    @pytest.mark.parametrize("value", [0, -3])
    def test_non_positive_value_raises_error(self, value):
        with pytest.raises(ValueError, match="positive"):
            BusTripId(value=value)

    @pytest.mark.parametrize("value", ["1", 1.0, True])
    def test_non_integer_value_raises_error(self, value):
        with pytest.raises(ValueError, match="integer"):
            BusTripId(value=value)

    def test_from_string(self):
        assert BusTripId.from_string("42") == BusTripId(value=42)

    @pytest.mark.parametrize("s", ["", "abc", "-1", "1.5", " 1", "\u00b2"])
    def test_from_string_rejects_non_digits(self, s):
        with pytest.raises(ValueError):
            BusTripId.from_string(s)
