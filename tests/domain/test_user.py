from __future__ import annotations

import pytest

from carfinder.domain.errors import ValidationError
from carfinder.domain.user import NewUser


def test_valid_registration_passes() -> None:
    NewUser(username="jdoe", password="secret1").validate()


def test_blank_username_and_short_password_are_reported_together() -> None:
    with pytest.raises(ValidationError) as exc_info:
        NewUser(username="   ", password="abc").validate()

    fields = {(error["field"], error["code"]) for error in exc_info.value.errors}
    assert fields == {("username", "REQUIRED"), ("password", "TOO_SHORT")}


def test_six_character_password_is_long_enough() -> None:
    NewUser(username="jdoe", password="123456").validate()
