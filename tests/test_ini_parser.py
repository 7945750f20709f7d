import pytest

from skinmod import (
    KeySwapBlockParser,
    SkinModKeySwap,
    format_ini_key,
    get_ini_key,
    get_ini_value,
    is_comment,
    is_ini_key,
    is_section,
    parse_key_swap,
)


# ----------------------------
# parse_key_swap
# ----------------------------
def test_parse_key_swap_reads_all_fields_and_stops_at_next_section():
    lines = [
        "; comment",
        "key_forward = F",
        "key_backward=B",
        "key_type = toggle",
        "key_swapvar = a,b,c",
        "[NextSection]",
        "key_forward = SHOULD_NOT_BE_READ",
        "key_type = hold",
    ]

    key_swap = parse_key_swap(lines, "Section1")

    assert key_swap is not None
    assert key_swap.section_key == "Section1"
    assert key_swap.forward_hotkey == "F"
    assert key_swap.backward_hotkey == "B"
    assert key_swap.type == "toggle"
    assert key_swap.swap_var == ("a", "b", "c")


def test_parse_key_swap_trims_section_line():
    key_swap = parse_key_swap(["key_type = cycle"], "   [KeySwap]  \n")
    assert key_swap is not None
    assert key_swap.section_key == "[KeySwap]"


def test_parse_key_swap_without_values_returns_none():
    lines = [
        "; key_forward = F",
        "   ;key_type = toggle",
        "condition = $active == 1",
        "run = CommandListBody",
    ]
    assert parse_key_swap(lines, "[KeySwap]") is None
    assert parse_key_swap([], "[KeySwap]") is None


def test_parse_key_swap_partial_record():
    key_swap = parse_key_swap(["  KEY_FORWARD = VK_UP  "], "[KeyUp]")
    assert key_swap == SkinModKeySwap(section_key="[KeyUp]", forward_hotkey="VK_UP")
    assert key_swap.any_values()


def test_parse_key_swap_key_without_equals_is_absent():
    # A recognised key with no "=" carries no value
    assert parse_key_swap(["key_forward"], "[Key]") is None


def test_parse_key_swap_later_line_wins_and_swapvar_is_not_trimmed():
    lines = [
        "key_forward = 1",
        "key_forward = 2",
        "key_swapvar = 0, 1,2",
    ]
    key_swap = parse_key_swap(lines, "[Key]")
    assert key_swap.forward_hotkey == "2"
    assert key_swap.swap_var == ("0", " 1", "2")


def test_parse_key_swap_half_bracketed_line_is_not_a_boundary():
    lines = ["key_forward = F", "[Broken", "key_backward = B"]
    key_swap = parse_key_swap(lines, "[Key]")
    assert key_swap.forward_hotkey == "F"
    assert key_swap.backward_hotkey == "B"


def test_parse_key_swap_empty_swapvar_still_counts_as_value():
    key_swap = parse_key_swap(["key_swapvar ="], "[Key]")
    assert key_swap is not None
    assert key_swap.swap_var == ("",)


def test_key_swap_record_is_immutable():
    key_swap = SkinModKeySwap(section_key="[Key]", type="toggle")
    with pytest.raises(AttributeError):
        key_swap.type = "hold"  # type: ignore[misc]


def test_key_swap_swap_var_is_frozen_and_record_hashable():
    source = ["a"]
    key_swap = SkinModKeySwap(section_key="[Key]", swap_var=source)

    # The caller's list is copied into a tuple
    source.append("b")
    assert key_swap.swap_var == ("a",)
    with pytest.raises(AttributeError):
        key_swap.swap_var.append("c")  # type: ignore[union-attr]

    parsed = parse_key_swap(["key_swapvar = a"], "[Key]")
    assert hash(parsed) == hash(key_swap)
    assert {parsed, key_swap} == {key_swap}


def test_any_values():
    assert not SkinModKeySwap(section_key="[Key]").any_values()
    assert SkinModKeySwap(section_key="[Key]", swap_var=[]).any_values()


# ----------------------------
# Line helpers
# ----------------------------
@pytest.mark.parametrize(
    "line, expected",
    [
        ("a=b=c", "bc"),
        ("key = value ", "value"),
        ("key=", ""),
        ("key = a = b = c", "a  b  c"),
        ("no equals here", None),
        ("; key = value", None),
        ("   ;key = value", None),
    ],
)
def test_get_ini_value(line, expected):
    assert get_ini_value(line) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("key = value", "key"),
        ("  key=value", "key"),
        ("a=b=c", "a"),
        ("  lonely  ", "lonely"),
        ("", ""),
        ("; key = value", None),
    ],
)
def test_get_ini_key(line, expected):
    assert get_ini_key(line) == expected


def test_is_comment():
    assert is_comment("; note")
    assert is_comment("   ;note")
    assert not is_comment("key = ; not a comment")
    assert not is_comment("")


def test_is_section():
    assert is_section("[Foo]")
    assert is_section("   [Foo]  ")
    assert not is_section("Foo")
    assert not is_section("[Foo")
    assert not is_section("Foo]")
    assert not is_section("")


def test_is_section_with_key():
    assert is_section("[foo]", "Foo")
    assert is_section("  [FOO] ", "foo")
    assert not is_section("[Bar]", "Foo")
    # Both ends must be bracketed before the key is even compared
    assert not is_section("[Foo", "Foo")
    assert not is_section("Foo", "Foo")
    assert is_section("[Foo]", "[Foo]")


def test_is_ini_key_is_a_case_insensitive_prefix_test():
    assert is_ini_key("  KEY_FORWARD=F", "key_forward")
    assert is_ini_key("key_forwardx = 1", "key_forward")
    assert not is_ini_key("forward = 1", "key_forward")
    assert not is_ini_key("key", "key_forward")


def test_format_ini_key():
    assert format_ini_key("key_type", "hold") == "key_type = hold"
    assert format_ini_key("key_type", "") == "key_type = "
    assert format_ini_key("key_type", None) is None


def test_static_methods_are_exposed_on_parser():
    assert KeySwapBlockParser.get_ini_value("a=b=c") == "bc"
    assert KeySwapBlockParser.is_section("[Foo]")


# ----------------------------
# Serialization
# ----------------------------
def test_to_ini_lines_parses_back_to_equal_record():
    original = SkinModKeySwap(
        section_key="[KeySwap]",
        forward_hotkey="VK_F5",
        type="cycle",
        swap_var=["0", "1", "2"],
    )

    lines = original.to_ini_lines()
    assert lines == [
        "[KeySwap]",
        "key_forward = VK_F5",
        "key_type = cycle",
        "key_swapvar = 0,1,2",
    ]
    assert parse_key_swap(lines[1:], lines[0]) == original


def test_to_ini_lines_brackets_a_bare_section_key():
    bare = SkinModKeySwap(section_key="KeySwap", forward_hotkey="F")

    lines = bare.to_ini_lines()
    assert lines == ["[KeySwap]", "key_forward = F"]

    # The header written out is bracketed, so the parsed key is too
    parsed = parse_key_swap(lines[1:], lines[0])
    assert parsed == SkinModKeySwap(section_key="[KeySwap]", forward_hotkey="F")
    assert parsed.to_ini_lines() == lines


def test_to_dict():
    key_swap = SkinModKeySwap(section_key="[Key]", backward_hotkey="B", swap_var=["x"])
    assert key_swap.to_dict() == {
        "section_key": "[Key]",
        "forward_hotkey": None,
        "backward_hotkey": "B",
        "type": None,
        "swap_var": ["x"],
    }
