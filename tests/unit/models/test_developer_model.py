from datetime import UTC

import pytest

from devroster.errors import ValidationError
from devroster.models.developer import Developer, Gender


@pytest.mark.unit
@pytest.mark.parametrize(("token", "expected"), [("MALE", Gender.MALE), (" FEMALE ", Gender.FEMALE)])
def test_gender_parse_by_member_name(token, expected) -> None:
    assert Gender.parse(token) is expected


@pytest.mark.unit
@pytest.mark.parametrize("token", [None, "", "  "])
def test_gender_parse_treats_blank_as_absent(token) -> None:
    assert Gender.parse(token) is None


@pytest.mark.unit
@pytest.mark.parametrize("token", ["male", "UNKNOWN_TOKEN"])
def test_gender_parse_rejects_unknown_token(token) -> None:
    with pytest.raises(ValidationError) as excinfo:
        Gender.parse(token)

    assert excinfo.value.status_code == 400
    assert excinfo.value.extra == {"gender": token}


@pytest.mark.unit
def test_developer_defaults_to_unsaved_record() -> None:
    dev = Developer(name="Kim", career=3, email="kim@example.com")

    assert dev.id == 0
    assert dev.is_new is True
    assert dev.gender is None
    assert dev.languages == []
    assert dev.created_at.tzinfo is UTC


@pytest.mark.unit
def test_developer_copies_languages() -> None:
    languages = ["Java"]
    dev = Developer(name="Kim", career=3, email="kim@example.com", languages=languages)
    languages.append("C")

    assert dev.languages == ["Java"]


@pytest.mark.unit
def test_developer_to_dict_uses_gender_name() -> None:
    dev = Developer(name="Kim", career=3, email="kim@example.com", gender=Gender.MALE, languages=["C"], id=4)

    payload = dev.to_dict()

    assert payload["id"] == 4
    assert payload["gender"] == "MALE"
    assert payload["languages"] == ["C"]
    assert payload["created_at"] == dev.created_at.isoformat()
