from DynParamUtils.formatting import format_optional


def test_none_uses_empty_marker():
    assert format_optional(None) is None
    assert format_optional(None, "") == ""


def test_strings_are_unchanged():
    assert format_optional("main") == "main"
    assert format_optional("") == ""


def test_booleans_are_lower_case():
    assert format_optional(True) == "true"
    assert format_optional(False, "") == "false"


def test_numbers_and_objects_use_str():
    assert format_optional(3) == "3"
    assert format_optional(2.5) == "2.5"
    assert format_optional(["x"]) == "['x']"
