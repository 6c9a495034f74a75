import pytest


@pytest.mark.parametrize(
    "source,expected",
    [
        ("10 20 swap pop", "20"),
        ("10 dup dup + swap pop", "20"),
        ("10 20 swap dup + div", "1"),
        ("1 2 pop", "1"),
        ("[ 1 ] dup append", "[1,1]"),
    ]
)
def test_stack_manipulation(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ('" hello " length', "5"),
        ('" hello world " length', "11"),
        ("[ 1 2 3 [ ] ] length", "4"),
        ("{ 10 20 + } length", "3"),
        ("{ } length", "0"),
        ('" 12 " parseInteger', "12"),
        ('" -12 " parseInteger', "-12"),
        ('" 12.34 " parseFloat', "12.34"),
        ('" 12 " parseFloat', "12.0"),
        ('" adam bob charlie " words', '[" adam "," bob "," charlie "]'),
        ('" " words', "[ ]"),
    ]
)
def test_strings(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[ 1 2 3 ]", "[1,2,3]"),
        ('[ 1 " bob " ]', '[1," bob "]'),
        ("[ 1 2 ] empty", "False"),
        ("[ ] empty", "True"),
        ("[ 1 2 3 ] head", "1"),
        ("[ 1 2 3 ] length", "3"),
        ("[ 1 2 3 ] tail", "[2,3]"),
        ("[ 1 ] tail", "[ ]"),
        ("1 [ ] cons", "[1]"),
        ("1 [ 2 3 ] cons", "[1,2,3]"),
        ("[ 1 2 ] [ ] append", "[1,2]"),
        ("[ 1 ] [ 2 3 ] append", "[1,2,3]"),
        ("[ 1 ] [ 2 3 ] cons", "[[1],2,3]"),
        ("[ [ 1 2 ] 3 ] head tail", "[2]"),
    ]
)
def test_lists(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,kind",
    [
        ("[ ] head", "InvalidOperation"),
        ("[ ] tail", "InvalidOperation"),
        ("1 head", "ExpectedList"),
        ("1 empty", "ExpectedList"),
        ("1 2 cons", "ExpectedList"),
        ("[ 1 ] 2 append", "ExpectedList"),
        ("1 words", "ExpectedString"),
        ("1 parseInteger", "ExpectedString"),
        ('" 1x " parseInteger', "InvalidOperation"),
        ('" 1.5 " parseInteger', "InvalidOperation"),
        ('" abc " parseFloat', "InvalidOperation"),
        ("True length", "InvalidOperation"),
    ]
)
def test_list_and_string_errors(run, source, kind):
    assert run(source) == f"Error: {kind}"


def test_cons_does_not_mutate_shared_list(run):
    # dup pushes the same list twice; cons must build a new one
    assert run("[ 2 ] dup 1 swap cons swap pop") == "[1,2]"
    assert run("[ 2 ] dup 1 swap cons pop") == "[2]"
