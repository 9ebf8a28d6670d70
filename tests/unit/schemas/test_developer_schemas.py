import pytest

from devroster.errors import ValidationError
from devroster.models.developer import Gender
from devroster.schemas.developers import DevCommand, DevNoPayload, DevNoQuery, DevParams, parse_int_field
from devroster.schemas.validation import validate_or_raise


@pytest.mark.unit
def test_dev_params_binds_declared_parameters() -> None:
    params = validate_or_raise(
        DevParams,
        {"name": "Kim", "career": "3", "email": "kim@example.com", "gender": "FEMALE", "lang": ["C", "Java"]},
    )

    dev = params.to_developer()
    assert dev.id == 0
    assert dev.name == "Kim"
    assert dev.career == 3
    assert dev.gender is Gender.FEMALE
    assert dev.languages == ["C", "Java"]


@pytest.mark.unit
@pytest.mark.parametrize("name", [None, "", "   "])
def test_dev_params_uses_default_name(name) -> None:
    payload = {"career": "1", "email": "a@example.com", "lang": []}
    if name is not None:
        payload["name"] = name

    params = validate_or_raise(DevParams, payload)

    assert params.name == "(unnamed)"


@pytest.mark.unit
def test_dev_params_rejects_negative_career() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_or_raise(DevParams, {"career": "-1", "email": "a@example.com", "lang": []})

    assert excinfo.value.extra["field"] == "career"
    assert excinfo.value.status_code == 400


@pytest.mark.unit
def test_dev_command_accepts_lang_alias_and_blank_id() -> None:
    command = validate_or_raise(
        DevCommand,
        {"id": "", "name": " Kim ", "career": "2", "email": "kim@example.com", "lang": ["Python", ""]},
    )

    assert command.id == 0
    assert command.name == "Kim"
    assert command.languages == ["Python"]
    assert command.gender is None


@pytest.mark.unit
def test_dev_command_languages_default_to_empty() -> None:
    command = validate_or_raise(DevCommand, {"name": "Kim", "career": "2", "email": "kim@example.com"})

    assert command.languages == []


@pytest.mark.unit
def test_dev_command_reports_unknown_gender() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_or_raise(
            DevCommand,
            {"name": "Kim", "career": "2", "email": "kim@example.com", "gender": "OTHER"},
        )

    assert str(excinfo.value) == "unknown gender: OTHER"


@pytest.mark.unit
def test_dev_command_requires_name() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_or_raise(DevCommand, {"career": "2", "email": "kim@example.com"})

    assert str(excinfo.value) == "missing required field: name"


@pytest.mark.unit
def test_dev_no_payload_ignores_extra_fields() -> None:
    payload = validate_or_raise(DevNoPayload, {"no": "7", "csrf_token": "token"})

    assert payload.no == 7


@pytest.mark.unit
def test_dev_no_query_rejects_unknown_parameters() -> None:
    with pytest.raises(ValidationError):
        validate_or_raise(DevNoQuery, {"no": "7", "page": "2"})


@pytest.mark.unit
def test_dev_no_rejects_boolean_and_text() -> None:
    with pytest.raises(ValidationError, match="no must be an integer"):
        validate_or_raise(DevNoPayload, {"no": "seven"})
    with pytest.raises(ValidationError, match="no must be an integer"):
        validate_or_raise(DevNoPayload, {"no": True})


@pytest.mark.unit
@pytest.mark.parametrize(("raw", "expected"), [("42", 42), ("+7", 7), (" -3 ", -3), ("-2147483648", -2147483648), (5, 5)])
def test_parse_int_field_accepts_signed_decimal(raw, expected) -> None:
    assert parse_int_field(raw, field="career") == expected


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["1_000", "2147483648", "-2147483649", "0x10", "1e3", "", None, 2**31, "٣"])
def test_parse_int_field_rejects_non_int32_input(raw) -> None:
    with pytest.raises(ValueError, match="career must be an integer"):
        parse_int_field(raw, field="career")


@pytest.mark.unit
def test_dev_command_rejects_underscore_separated_career() -> None:
    with pytest.raises(ValidationError, match="career must be an integer"):
        validate_or_raise(DevCommand, {"name": "Kim", "career": "1_000", "email": "kim@example.com"})
