import pytest

from tysp.cxa import ArgMode, CxaError, Fatal, Flag, Found, ParseResult, parse

FLAGS = [
    Flag("help", "h", ArgMode.NON),
    Flag("file", "f", ArgMode.YES),
    Flag("color", "c", ArgMode.MAY),
]


def by_name(name):
    return next(flag for flag in FLAGS if flag.name == name)


def test_no_arguments_gives_empty_result():
    result = parse(["prog"], FLAGS)
    assert result == ParseResult()
    assert result.last is None


def test_long_flag_without_argument():
    result = parse(["prog", "--help"], FLAGS)
    assert result.found == [Found(by_name("help"), None)]


def test_short_flag_found_by_id():
    result = parse(["prog", "-h"], FLAGS)
    assert result.found == [Found(by_name("help"), None)]


def test_long_flag_with_equals_argument():
    result = parse(["prog", "--file=data.tysp"], FLAGS)
    assert result.found == [Found(by_name("file"), "data.tysp")]


def test_argument_in_next_element():
    result = parse(["prog", "-f", "data.tysp"], FLAGS)
    assert result.last == Found(by_name("file"), "data.tysp")


def test_optional_argument_may_be_given_or_left_out():
    with_arg = parse(["prog", "--color", "red"], FLAGS)
    without = parse(["prog", "--color", "-h"], FLAGS)
    assert with_arg.found[0].argument == "red"
    assert without.found[0].argument is None
    assert [f.flag for f in without.found] == [by_name("color"), by_name("help")]


def test_found_keeps_command_line_order():
    argv = ["prog", "-c", "--file=x", "--help"]
    result = parse(argv, FLAGS)
    assert [f.flag.name for f in result.found] == ["color", "file", "help"]


def test_everything_after_terminator_is_positional():
    argv = ["prog", "-h", "--", "a", "--file", "-x"]
    result = parse(argv, FLAGS)
    assert result.positional == argv[3:]
    assert len(result.found) == 1


def test_only_first_char_of_short_flag_counts():
    result = parse(["prog", "-hzz"], FLAGS)
    assert result.found[0].flag == by_name("help")


def test_long_flag_requires_exact_name():
    argv = ["prog", "--hel"]
    with pytest.raises(CxaError) as info:
        parse(argv, FLAGS)
    assert info.value.fatal is Fatal.UNDEF_FLAG
    assert info.value.index == argv.index("--hel")


def test_longer_long_flag_is_undefined():
    with pytest.raises(CxaError) as info:
        parse(["prog", "--helpme"], FLAGS)
    assert info.value.fatal is Fatal.UNDEF_FLAG


def test_unknown_short_flag():
    with pytest.raises(CxaError) as info:
        parse(["prog", "-z"], FLAGS)
    assert info.value.fatal is Fatal.UNDEF_FLAG
    assert str(info.value) == "flag found was not defined as a program's option"


@pytest.mark.parametrize("bad", ["-", "-!", "--!x", "-_"])
def test_non_sense_elements(bad):
    argv = ["prog", "-h", bad]
    with pytest.raises(CxaError) as info:
        parse(argv, FLAGS)
    assert info.value.fatal is Fatal.NON_SENSE
    assert info.value.index == argv.index(bad)
    assert info.value.element == bad


def test_positional_before_terminator_is_unnecessary():
    argv = ["prog", "stray"]
    with pytest.raises(CxaError) as info:
        parse(argv, FLAGS)
    assert info.value.fatal is Fatal.UNNECESSARY_ARG
    assert str(info.value) == "giving argument to a flag which already has its own"


def test_argument_to_flag_that_takes_none():
    argv = ["prog", "--help", "value"]
    with pytest.raises(CxaError) as info:
        parse(argv, FLAGS)
    assert info.value.fatal is Fatal.UNNECESSARY_ARG
    assert info.value.index == argv.index("value")


def test_second_argument_to_flag_is_unnecessary():
    argv = ["prog", "--file=a", "b"]
    with pytest.raises(CxaError) as info:
        parse(argv, FLAGS)
    assert info.value.fatal is Fatal.UNNECESSARY_ARG


def test_required_argument_missing_before_next_flag():
    argv = ["prog", "-f", "-h"]
    with pytest.raises(CxaError) as info:
        parse(argv, FLAGS)
    assert info.value.fatal is Fatal.ARG_EXPECTED
    assert info.value.index == argv.index("-h")


def test_required_argument_missing_at_end():
    argv = ["prog", "-h", "--file"]
    with pytest.raises(CxaError) as info:
        parse(argv, FLAGS)
    assert info.value.fatal is Fatal.ARG_EXPECTED
    assert info.value.index == len(argv) - 1
    assert str(info.value) == "flag was expecting an argument but none was given"


def test_required_argument_not_taken_from_after_terminator():
    with pytest.raises(CxaError) as info:
        parse(["prog", "-f", "--", "x"], FLAGS)
    assert info.value.fatal is Fatal.ARG_EXPECTED


def test_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse(["prog", "-q"], FLAGS)


def test_fatal_messages_match_the_table():
    with pytest.raises(CxaError) as info:
        parse(["prog", "-!"], FLAGS)
    assert info.value.fatal.message == "element within argv does not make sense"
    assert str(info.value) == info.value.fatal.message


def test_parse_is_independent_between_calls():
    parse(["prog", "--", "x"], FLAGS)
    result = parse(["prog", "-h"], FLAGS)
    assert result.positional == []
    assert result.found[0].flag == by_name("help")