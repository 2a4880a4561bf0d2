import pytest

from leave_tracker.common.validators import require_int
from leave_tracker.core.exceptions import ValidationError


@pytest.mark.parametrize("value, expected", [(7, 7), (7.0, 7), (" 12 ", 12), ("-3", -3)])
def test_require_int_accepts_whole_numbers(value, expected):
    assert require_int(value, "Employee ID") == expected


@pytest.mark.parametrize("value", [1.9, "1.5", "abc", None, True, [1]])
def test_require_int_rejects_everything_else(value):
    with pytest.raises(ValidationError):
        require_int(value, "Employee ID")
