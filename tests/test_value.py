"""Tests para formbind.value y formbind.ref."""

from dataclasses import dataclass
from datetime import datetime, timedelta

import pytest

from formbind.parse import ParseError
from formbind.ref import AttrRef, ItemRef, Slot
from formbind.value import Date, Days, Float, Int, Required, Text


@dataclass
class Model:
    count: int = 0
    label: str = ""


class TestRefs:
    """Tests para referencias a almacenamiento externo."""

    def test_attr_ref_writes_model(self):
        m = Model()
        ref = AttrRef(m, "count")
        ref.set(3)
        assert m.count == 3
        assert ref.get() == 3

    def test_item_ref_writes_mapping(self):
        data = {"a": 1}
        ref = ItemRef(data, "a")
        ref.set(2)
        assert data == {"a": 2}

    def test_value_does_not_own_storage(self):
        m = Model()
        v = Int(AttrRef(m, "count"))
        m.count = 9
        assert v.to_text() == "9"


class TestInt:
    """Tests para Int."""

    def test_default_at_zero(self):
        assert Int(Slot(0), default=18).to_text() == "18"
        assert Int(Slot(3), default=18).to_text() == "3"

    def test_from_text(self):
        slot = Slot(0)
        Int(slot).from_text("-12")
        assert slot.get() == -12

    def test_invalid_stores_zero(self):
        slot = Slot(5)
        with pytest.raises(ParseError, match="must be a valid number"):
            Int(slot).from_text("cinco")
        assert slot.get() == 0

    def test_clear(self):
        slot = Slot(5)
        Int(slot).clear()
        assert slot.get() == 0

    def test_round_trip(self):
        v = Int(Slot(123))
        v.from_text(v.to_text())
        assert v.to_text() == "123"


class TestFloat:
    """Tests para Float."""

    def test_two_decimals(self):
        assert Float(Slot(1.5)).to_text() == "1.50"
        assert Float(Slot(0.0)).to_text() == "0.00"

    def test_default_at_zero(self):
        assert Float(Slot(0.0), default=2.25).to_text() == "2.25"

    def test_invalid(self):
        slot = Slot(1.0)
        with pytest.raises(ParseError):
            Float(slot).from_text("uno")
        assert slot.get() == 0.0

    def test_round_trip(self):
        slot = Slot(1234.5)
        v = Float(slot)
        v.from_text(v.to_text())
        assert slot.get() == 1234.5


class TestText:
    """Tests para Text."""

    def test_default_when_empty(self):
        assert Text(Slot(""), default="anónimo").to_text() == "anónimo"

    def test_accepts_anything(self):
        slot = Slot("")
        Text(slot).from_text("  ")
        assert slot.get() == "  "

    def test_clear(self):
        slot = Slot("x")
        Text(slot).clear()
        assert slot.get() == ""


class TestDays:
    """Tests para Days."""

    def test_to_text(self):
        assert Days(Slot(timedelta(days=3))).to_text() == "3"

    def test_from_text(self):
        slot = Slot(timedelta(0))
        Days(slot).from_text("5")
        assert slot.get() == timedelta(hours=120)

    def test_zero_is_error(self):
        with pytest.raises(ParseError, match="must be an amount greater than 0"):
            Days(Slot(timedelta(0))).from_text("0")

    def test_clear_is_one_day(self):
        slot = Slot(timedelta(days=9))
        Days(slot).clear()
        assert slot.get() == timedelta(hours=24)


class TestRequired:
    """Tests para el decorador Required."""

    def test_blank_is_rejected_before_inner(self):
        slot = Slot("previo")
        with pytest.raises(ParseError, match="required"):
            Required(Text(slot)).from_text("   ")
        assert slot.get() == "previo"

    def test_delegates(self):
        slot = Slot(0)
        v = Required(Int(slot, default=4))
        assert v.to_text() == "4"
        v.from_text("8")
        assert slot.get() == 8
        v.clear()
        assert slot.get() == 0

    def test_inner_errors_propagate(self):
        with pytest.raises(ParseError, match="must be a valid number"):
            Required(Int(Slot(0))).from_text("abc")


class TestDate:
    """Tests para Date."""

    def test_default_when_unset(self):
        v = Date(Slot(None), default=datetime(2020, 1, 2))
        assert v.to_text() == "2/1/2020"

    def test_empty_without_default(self):
        assert Date(Slot(None)).to_text() == ""

    def test_from_text(self):
        slot = Slot(None)
        Date(slot).from_text("31/12/2020")
        assert slot.get() == datetime(2020, 12, 31)

    def test_invalid_unsets(self):
        slot = Slot(datetime(2020, 1, 1))
        with pytest.raises(ParseError, match="must be dd/mm/yyyy"):
            Date(slot).from_text("2020-01-01")
        assert slot.get() is None

    def test_clear_is_now(self):
        slot = Slot(None)
        before = datetime.now()
        Date(slot).clear()
        assert before <= slot.get() <= datetime.now()

    def test_round_trip(self):
        slot = Slot(datetime(2021, 7, 5))
        v = Date(slot)
        v.from_text(v.to_text())
        assert slot.get() == datetime(2021, 7, 5)


class TestRoundTrip:
    """from_text(to_text()) conserva el dato para cada tipo de valor."""

    def test_days(self):
        slot = Slot(timedelta(days=12))
        v = Days(slot)
        v.from_text(v.to_text())
        assert slot.get() == timedelta(days=12)

    def test_text(self):
        slot = Slot("  hola mundo ")
        v = Text(slot)
        v.from_text(v.to_text())
        assert slot.get() == "  hola mundo "

    def test_required_text(self):
        slot = Slot("Ada")
        v = Required(Text(slot))
        v.from_text(v.to_text())
        assert slot.get() == "Ada"

    def test_required_int(self):
        slot = Slot(-4)
        v = Required(Int(slot))
        v.from_text(v.to_text())
        assert slot.get() == -4

    @pytest.mark.parametrize("v,slot,expected", [
        (lambda s: Int(s, default=18), Slot(0), 18),
        (lambda s: Float(s, default=2.5), Slot(0.0), 2.5),
        (lambda s: Text(s, default="anónimo"), Slot(""), "anónimo"),
        (lambda s: Date(s, default=datetime(2020, 5, 6)), Slot(None), datetime(2020, 5, 6)),
    ])
    def test_default_substitution(self, v, slot, expected):
        """En el valor cero, el texto mostrado es el default y se guarda al parsear."""
        value = v(slot)
        text = value.to_text()
        value.from_text(text)
        assert slot.get() == expected
        assert value.to_text() == text
