import pytest

from clopts.exceptions import CastError
from clopts.type_caster import OptionType, TypeCaster, infer_option_type


@pytest.fixture
def caster():
    return TypeCaster.default()


@pytest.mark.parametrize(
    "value, expected",
    [
        ("text", OptionType.STRING),
        (3000, OptionType.NUMBER),
        (0.5, OptionType.NUMBER),
        (False, OptionType.BOOLEAN),
        (True, OptionType.BOOLEAN),
        (["a"], OptionType.ARRAY),
        ({"a": "b"}, OptionType.OBJECT),
    ],
)
def test_infer_option_type(value, expected):
    assert infer_option_type(value) is expected


def test_infer_option_type_unknown():
    with pytest.raises(CastError):
        infer_option_type(None)


def test_option_type_array_alias():
    assert OptionType("array") is OptionType.ARRAY
    assert OptionType.ARRAY.label == "array"
    assert OptionType.NUMBER.label == "number"


def test_option_type_invalid():
    with pytest.raises(ValueError, match="Must be one of"):
        OptionType("float")


def test_boolean_toggle(caster):
    assert caster.cast("boolean", [], True) is False
    assert caster.cast("boolean", [], False) is True


@pytest.mark.parametrize(
    "token, expected",
    [("true", True), ("TRUE", True), ("False", False), ("false", False)],
)
def test_boolean_literals(caster, token, expected):
    assert caster.cast(OptionType.BOOLEAN, [token], False) is expected


def test_boolean_invalid(caster):
    with pytest.raises(CastError, match="boolean"):
        caster.cast("boolean", ["yes"], False)


def test_number(caster):
    assert caster.cast("number", ["42"], 0) == 42
    assert isinstance(caster.cast("number", ["42"], 0), int)
    assert caster.cast("number", ["3.14"], 0) == 3.14
    assert caster.cast("number", ["-7"], 0) == -7
    assert caster.cast("number", ["1e3"], 0) == 1000.0


@pytest.mark.parametrize("token", ["abc", "", "nan", "4 2"])
def test_number_invalid(caster, token):
    with pytest.raises(CastError, match="number"):
        caster.cast("number", [token], 0)


def test_string(caster):
    assert caster.cast("string", ["hello"], "") == "hello"


def test_array_keeps_single_token_as_list(caster):
    assert caster.cast("string[]", ["a"], []) == ["a"]
    assert caster.cast("string[]", ["a", "b", "c"], []) == ["a", "b", "c"]


def test_object(caster):
    assert caster.cast("object", ["a:1", "b:x:y"], {}) == {"a": "1", "b": "x:y"}


def test_object_later_keys_overwrite(caster):
    assert caster.cast("object", ["a:1", "a:2", "b:"], {}) == {"a": "2", "b": ""}


def test_object_requires_key(caster):
    with pytest.raises(CastError, match="object"):
        caster.cast("object", [":value"], {})


def test_multiple_arguments_rejected(caster):
    with pytest.raises(CastError, match="Multiple arguments"):
        caster.cast("string", ["a", "b"], "")
    with pytest.raises(CastError, match="Multiple arguments"):
        caster.cast("boolean", ["true", "false"], False)


@pytest.mark.parametrize("tag", ["string", "number", "string[]", "object"])
def test_nothing_assigned(caster, tag):
    with pytest.raises(CastError, match="Nothing is assigned"):
        caster.cast(tag, [], None)


def test_undefined_type(caster):
    with pytest.raises(CastError, match="undefined"):
        caster.cast("date", ["2024-01-01"], None)


def test_register_custom_type():
    caster = TypeCaster().register("upper", lambda arg, _: arg.upper())
    assert caster.is_registered("upper")
    assert not caster.is_registered("string")
    assert caster.cast("upper", ["abc"], None) == "ABC"
