from __future__ import annotations

import pytest

from tars.domain.checks import is_any_none, require_present
from tars.domain.errors import MissingFieldError


def test_is_any_none() -> None:
    assert is_any_none(1, None, "x")
    assert not is_any_none(0, "", [])
    assert not is_any_none()


def test_require_present_names_first_missing_field() -> None:
    require_present(name="n", tags=[])

    with pytest.raises(MissingFieldError, match="'phone'") as excinfo:
        require_present(name="n", phone=None, email=None)
    assert excinfo.value.field_name == "phone"
    assert isinstance(excinfo.value, ValueError)
