from cann_table.validators import validate_competition


def test_validate_competition_ok():
    v, w = validate_competition("pl")
    assert v == "PL"
    assert w == []


def test_validate_competition_alias():
    v, w = validate_competition(" la liga ")
    assert v == "PD"
    assert w == []


def test_validate_competition_unknown_soft():
    v, w = validate_competition("xyz")
    assert v == "PL"
    assert w and "competition_unknown" in w[0]


def test_validate_competition_missing_uses_default():
    v, w = validate_competition(None, default="SA")
    assert v == "SA"
    assert w == []
