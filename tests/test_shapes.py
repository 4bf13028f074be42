# tests/test_shapes.py

import pytest

from calmath.core.errors import InvalidShapeError
from calmath.core.shapes import days_of, month_from_obj, week_from_obj, year_from_obj
from calmath.core.types import Month, Week, Year


@pytest.mark.parametrize("bad", [-1, True, 2.5, "3", None])
def test_week_rejects_invalid_counts(bad):
    with pytest.raises(InvalidShapeError):
        Week(bad)

def test_week_from_obj_accepts_both_key_styles():
    assert week_from_obj({"number_of_days": 3}) == Week(3)
    assert week_from_obj({"numberOfDays": 4}) == Week(4)
    assert week_from_obj(Week(5)) == Week(5)

@pytest.mark.parametrize("bad", [None, "7", 7, {}, {"number_of_days": "7"}, {"number_of_days": False}, {"numberOfDays": -2}])
def test_week_from_obj_rejects(bad):
    with pytest.raises(InvalidShapeError):
        week_from_obj(bad)

def test_month_from_obj():
    raw = {"weeks": [{"numberOfDays": 5}, {"number_of_days": 3}]}
    assert month_from_obj(raw) == Month((Week(5), Week(3)))
    assert month_from_obj({"weeks": []}) == Month(())

def test_year_from_obj_nested():
    raw = {"months": [{"weeks": [{"numberOfDays": 10}] * 3}] * 3}
    year = year_from_obj(raw)
    assert isinstance(year, Year)
    assert len(year.months) == 3
    assert all(m == Month((Week(10),) * 3) for m in year.months)

def test_year_from_obj_is_identity_on_dataclasses():
    year = Year((Month((Week(1), Week(2))),))
    assert year_from_obj(year) == year

@pytest.mark.parametrize("bad", [[], {"months": None}, {"months": [{"weeks": 1}]}, {"weeks": []}])
def test_year_from_obj_rejects(bad):
    with pytest.raises(InvalidShapeError):
        year_from_obj(bad)

def test_invalid_shape_is_a_type_error():
    with pytest.raises(TypeError):
        days_of(None)
