import pytest


@pytest.mark.parametrize(
    "source,expected",
    [
        ("True if { 20 } { }", "20"),
        ("True if { 20 10 + } { 3 }", "30"),
        ("10 5 5 == if { 10 + } { 100 + }", "20"),
        ("False if { } { 45 }", "45"),
        ("True if { False if { 50 } { 100 } } { 30 }", "100"),
        # bare-word and literal branches
        ("True if 20 { }", "20"),
        ("True if { 20 10 + } 3", "30"),
        ("10 10 5 5 == if + { 100 + }", "20"),
        ("False if { } 45", "45"),
        ("True if { False if 50 100 } 30", "100"),
        ("True if [ 1 2 ] [ ]", "[1,2]"),
    ]
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_consumes_both_branches_on_non_boolean(run, reported):
    assert run("1 if { 2 } { 3 } 4") == "4"
    assert reported == [("if", "ExpectedBool")]


def test_if_without_branches(run):
    assert run("True if") == "Error: InvalidOperation"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[ 1 2 3 ] map { 10 * }", "[10,20,30]"),
        ("[ 1 2 3 ] map { 1 + }", "[2,3,4]"),
        ("[ 1 2 3 4 ] map { dup 2 > if { 10 * } { 2 * } }", "[2,4,30,40]"),
        ("[ ] map { 1 + }", "[ ]"),
        ('[ " 1 " " 2 " ] map parseInteger', "[1,2]"),
        ("[ [ 1 2 ] [ 3 ] ] map length", "[2,1]"),
        ("[ [ 1 2 ] [ 3 ] ] map { 0 foldl + }", "[3,3]"),
        ("[ 1 2 ] map { { 10 * } }", "[10,20]"),
    ]
)
def test_map(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[ 1 2 3 4 ] each { 10 * } + + +", "100"),
        ('[ " 1 " " 2 " " 3 " ] each { parseInteger } [ ] cons cons cons', "[1,2,3]"),
        ('[ " 1 " " 2 " " 3 " ] each parseInteger [ ] 3 times cons', "[1,2,3]"),
        ("[ 7 ] each { 1 + }", "8"),
        ("5 [ ] each { 1 + }", "5"),
    ]
)
def test_each(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[ 1 2 3 4 ] 0 foldl { + }", "10"),
        ("[ 2 5 ] 20 foldl { div }", "2"),
        ("[ 1 2 3 4 ] 0 foldl +", "10"),
        ("[ 2 5 ] 20 foldl div", "2"),
        ("[ ] 7 foldl +", "7"),
        ("[ 1.5 2.5 ] 0 foldl +", "4.0"),
        ("[ 1 2 3 ] 1 foldl { * }", "6"),
    ]
)
def test_foldl(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 times { 100 50 + }", "150"),
        ("5 times { 10 } + + + +", "50"),
        ("5 times 10 4 times +", "50"),
        ("3 times { [ ] } append append", "[ ]"),
        ("1 0 times { 5 }", "1"),
    ]
)
def test_times(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,kind",
    [
        ("1 map { 1 + }", "ExpectedList"),
        ("1 each { 1 + }", "ExpectedList"),
        ("1 0 foldl +", "ExpectedList"),
        ("[ 1 ] 0.5 foldl +", "ExpectedNumber"),
        ("[ 1 ] True foldl +", "ExpectedNumber"),
        ("1.5 times { 1 }", "ExpectedNumber"),
        ("True times { 1 }", "ExpectedNumber"),
        ("[ 1 ] map", "InvalidOperation"),
        ("2 times", "InvalidOperation"),
        ("[ 1 ] map { 1", "IncompleteQuotation"),
    ]
)
def test_combinator_errors(run, source, kind):
    assert run(source) == f"Error: {kind}"


def test_map_body_failure_fails_the_map(run, reported):
    assert run("[ 1 ] map { head }") == "Error: ExpectedList"
    kinds = [kind for _, kind in reported]
    # reported inside the body, then again for the map itself
    assert kinds == ["ExpectedList", "ExpectedList"]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("{ 20 10 + } exec", "30"),
        ("10 { 20 + } exec", "30"),
        ("10 20 { + } exec", "30"),
        ("{ { 10 20 + } exec } exec", "30"),
        ("{ 1 2 + }", "3"),
    ]
)
def test_quotations(run, source, expected):
    assert run(source) == expected
