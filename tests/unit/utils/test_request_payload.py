import pytest
from werkzeug.datastructures import MultiDict

from devroster.utils.request_payload import parse_payload


@pytest.mark.unit
def test_parse_payload_keeps_list_shape_for_single_checkbox() -> None:
    payload = parse_payload(MultiDict([("name", " Kim "), ("lang", "Java")]), list_fields=("lang",))

    assert payload == {"name": "Kim", "lang": ["Java"]}


@pytest.mark.unit
def test_parse_payload_collects_all_list_values_in_order() -> None:
    payload = parse_payload(MultiDict([("lang", "C"), ("lang", "Python")]), list_fields=("lang",))

    assert payload["lang"] == ["C", "Python"]


@pytest.mark.unit
def test_parse_payload_uses_last_value_for_scalar_fields() -> None:
    payload = parse_payload(MultiDict([("career", "1"), ("career", "2")]))

    assert payload["career"] == "2"


@pytest.mark.unit
def test_parse_payload_strips_nul_characters() -> None:
    assert parse_payload({"email": "a\x00@example.com"}) == {"email": "a@example.com"}


@pytest.mark.unit
def test_parse_payload_forces_list_for_mapping_input() -> None:
    assert parse_payload({"lang": "C"}, list_fields=("lang",)) == {"lang": ["C"]}
    assert parse_payload({"lang": None}, list_fields=("lang",)) == {"lang": []}


@pytest.mark.unit
def test_parse_payload_rejects_unsupported_payload() -> None:
    with pytest.raises(TypeError):
        parse_payload(["not", "a", "mapping"])


@pytest.mark.unit
def test_parse_payload_runs_once_per_request(app) -> None:
    with app.test_request_context("/demo/dev1.do", method="POST", data={"name": "Kim"}):
        parse_payload({"name": "Kim"})
        with pytest.raises(RuntimeError):
            parse_payload({"name": "Kim"})
