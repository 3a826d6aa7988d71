from toolrelay.tools.calculator import CalculatorIn
from toolrelay.tools.validation import describe_violations, validate_arguments


def test_valid_arguments_pass_through():
    validated, violations = validate_arguments(CalculatorIn, {"operation": "add", "a": "2", "b": "3"})
    assert violations == []
    assert validated == CalculatorIn(operation="add", a="2", b="3")


def test_numbers_are_not_coerced_to_strings():
    validated, violations = validate_arguments(CalculatorIn, {"operation": "add", "a": 2, "b": "3"})
    assert validated is None
    assert [v.field for v in violations] == ["a"]
    assert violations[0].kind == "string_type"


def test_every_violated_field_is_reported():
    validated, violations = validate_arguments(CalculatorIn, {"operation": "modulo", "a": "1"})
    assert validated is None
    by_field = {v.field: v for v in violations}
    assert set(by_field) == {"operation", "b"}
    assert by_field["operation"].kind == "literal_error"
    assert by_field["b"].kind == "missing"
    assert "b: Field required" in describe_violations(violations)


def test_unknown_keys_are_ignored():
    validated, violations = validate_arguments(
        CalculatorIn, {"operation": "add", "a": "1", "b": "2", "note": "extra"}
    )
    assert violations == []
    assert not hasattr(validated, "note")


def test_non_mapping_arguments():
    validated, violations = validate_arguments(CalculatorIn, ["add", "1", "2"])
    assert validated is None
    assert violations[0].field == "(root)"
    assert violations[0].kind == "model_type"
