from chromaspace.utils.default import first_defined, value_or_default


def test_value_or_default():
    assert value_or_default(None, 5) == 5
    assert value_or_default(0, 5) == 0
    assert value_or_default("", "x") == ""


def test_first_defined_precedence():
    assert first_defined("explicit", "stored", "default") == "explicit"
    assert first_defined(None, "stored", "default") == "stored"
    assert first_defined(None, None, "default") == "default"
    assert first_defined(None, None) is None
