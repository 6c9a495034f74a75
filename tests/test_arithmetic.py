import pytest


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 1 +", "2"),
        ("10 20 *", "200"),
        ("20 2 div", "10"),
        ("20 2 /", "10.0"),
        ("1 1.0 +", "2.0"),
        ("10 20.0 *", "200.0"),
        ("20 2.0 div", "10"),
        ("20.0 2.0 div", "10"),
        ("5 3 -", "2"),
        ("3 5 -", "-2"),
        ("5.5 0.5 -", "5.0"),
        ("7 2 div", "3"),
        ("-7 2 div", "-3"),
        ("7 -2 div", "-3"),
        ("-7.9 2 div", "-3"),
        ("7 2 /", "3.5"),
        ("99999999999999999999 99999999999999999999 *", "9999999999999999999800000000000000000001"),
        ("20 10 <", "False"),
        ("20 10 >", "True"),
        ("20 10.0 >", "True"),
        ("20.0 20.0 >", "False"),
        ("1 2.5 <", "True"),
    ]
)
def test_arithmetic_and_comparison(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("10 10 ==", "True"),
        ("10 10.0 ==", "True"),
        ("10 11 ==", "False"),
        ("True True ==", "True"),
        ("True 40 40 == ==", "True"),
        ('" abba " " abba " ==', "True"),
        ('" abba " " abc " ==', "False"),
        ("[ ] [ ] ==", "True"),
        ("[ 1 2 ] [ 1 2 ] ==", "True"),
        ("[ [ ] ] [ [ ] ] ==", "True"),
        ("[ 1 2 ] [ 1 3 ] ==", "False"),
        ("[ 1 2 ] [ 1 ] ==", "False"),
        ("[ [ 1 ] ] [ [ 2 ] ] ==", "False"),
        ("[ 1 ] [ 1.0 ] ==", "True"),
        ("[ 1 ] [ True ] ==", "False"),
        ("{ 1 + } { 1 + } ==", "True"),
    ]
)
def test_equality(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("False False &&", "False"),
        ("True True &&", "True"),
        ("False True ||", "True"),
        ("False False ||", "False"),
        ("False not", "True"),
        ("True not", "False"),
    ]
)
def test_logic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,kind",
    [
        ("1 True +", "ExpectedNumber"),
        ('" a " 1 -', "ExpectedNumber"),
        ("[ ] 2 *", "ExpectedNumber"),
        ("1 { } /", "ExpectedNumber"),
        ("True 1 div", "ExpectedNumber"),
        ("True 1 <", "ExpectedNumber"),
        ("1 0 div", "InvalidOperation"),
        ("1 True &&", "ExpectedBool"),
        ("1 True ||", "ExpectedBool"),
        ("1 not", "ExpectedBool"),
        ("1 True ==", "InvalidOperation"),
        ('1 " 1 " ==', "InvalidOperation"),
    ]
)
def test_wrong_operand_kinds(run, reported, source, kind):
    # both operands are consumed, so the failure is also the line's result
    assert run(source) == f"Error: {kind}"
    assert reported[-1][1] == kind


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 0 /", "inf"),
        ("1.0 0.0 /", "inf"),
        ("-3 0 /", "-inf"),
        ("3 -0.0 /", "-inf"),
        ("0 0 /", "nan"),
        ("0.0 0 /", "nan"),
    ]
)
def test_float_division_by_zero_follows_ieee(run, reported, source, expected):
    assert run(source) == expected
    assert reported == []


def test_non_finite_results_survive_reduction(run):
    # values left beside a quotation are re-read from their source text
    assert run("1 0 / { 2 pop }") == "inf"
    assert run('" -inf " parseFloat { 1 + }') == "-inf"
    assert run("[ ] 1 0 / swap cons { 0 0 / swap cons }") == "[nan,inf]"
