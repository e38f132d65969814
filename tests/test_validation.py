import pytest

from prd_prompts.utils.validation import ValidationError, Validator


def test_binding_pair_splits_on_first_equals() -> None:
    assert Validator.is_binding_pair(" Company Name =Acme = Inc") == ("Company Name", "Acme = Inc")


def test_binding_pair_allows_empty_value() -> None:
    assert Validator.is_binding_pair("Title=") == ("Title", "")


@pytest.mark.parametrize("value", ["no equals sign", "=value", "[Title]=CRM"])
def test_invalid_binding_pair(value) -> None:
    with pytest.raises(ValidationError):
        Validator.is_binding_pair(value)


def test_json_object() -> None:
    assert Validator.is_json_object('{"Title": "CRM"}') == {"Title": "CRM"}


@pytest.mark.parametrize("value", ["[1, 2]", "{not json"])
def test_invalid_json_object(value) -> None:
    with pytest.raises(ValidationError):
        Validator.is_json_object(value)


def test_not_empty() -> None:
    assert Validator.not_empty("  text ") == "text"
    with pytest.raises(ValidationError):
        Validator.not_empty("   ")
