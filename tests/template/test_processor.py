"""
Tests for the template processor.

Checks substitution from mappings and callbacks, alignment,
format dispatch and error propagation.
"""

from collections import OrderedDict
from unittest.mock import Mock

import pytest

from cfmt.errors import CFUserError, InvalidAlignmentError, InvalidFormatError, KeyNotFoundError
from cfmt.template.processor import TemplateFormatter, pad, parse_alignment


@pytest.fixture
def formatter(en_backend):
    return TemplateFormatter(locale="en", backend=en_backend)


class TestMappingSubstitution:
    """Substitution from a key -> value mapping."""

    def test_substitutes_keys(self, formatter):
        assert formatter.format("Hello ${name}!", {"name": "Alice"}) == "Hello Alice!"
        assert formatter.format("Output ${first} ${second} ${first}", {"first": 1, "second": 2}) == "Output 1 2 1"

    def test_template_without_placeholders_is_unchanged(self, formatter):
        text = "No placeholders here: $ { } {x} $x"
        assert formatter.format(text, {}) == text

    def test_malformed_placeholders_are_copied(self, formatter):
        assert formatter.format("${a,1,2} ${} ${open", {"a": 1}) == "${a,1,2} ${} ${open"

    @pytest.mark.parametrize("value, expected", [
        ("text", "text"),
        (42, "42"),
        (2.0, "2"),
        (0.5, "0.5"),
        (True, "True"),
        (None, "None"),
        ([1, 2], "[1, 2]"),
    ])
    def test_natural_string_form(self, formatter, value, expected):
        assert formatter.format("${k}", {"k": value}) == expected

    def test_missing_key(self, formatter):
        with pytest.raises(KeyNotFoundError) as exc_info:
            formatter.format("Hello ${unknown}.", {"a": "a"})

        assert exc_info.value.key == "unknown"
        assert str(exc_info.value) == "Key not found: unknown"

    @pytest.mark.parametrize("key", ["toString", "keys", "__class__", "get", "items"])
    def test_attribute_names_are_not_keys(self, formatter, key):
        """Names of mapping methods and attributes are still absent keys."""
        with pytest.raises(KeyNotFoundError) as exc_info:
            formatter.format("Hello ${" + key + "}.", {"a": "a"})
        assert exc_info.value.key == key

    def test_none_value_is_present(self, formatter):
        """A key present with a None value is not a missing key."""
        assert formatter.format("[${k}]", {"k": None}) == "[None]"

    def test_key_whitespace_is_significant(self, formatter):
        with pytest.raises(KeyNotFoundError) as exc_info:
            formatter.format("${ name }", {"name": "x"})
        assert exc_info.value.key == " name "

    def test_no_partial_output(self, formatter):
        """The first failure aborts the whole template."""
        with pytest.raises(KeyNotFoundError):
            formatter.format("${a} ${missing} ${b}", {"a": 1, "b": 2})

    def test_any_mapping_type(self, formatter):
        assert formatter.format("${x}-${y}", OrderedDict(x=1, y=2)) == "1-2"

    def test_source_is_not_mutated(self, formatter):
        data = {"a": 1.5}
        formatter.format("${a:f} ${a,5}", data)
        assert data == {"a": 1.5}

    def test_idempotent(self, formatter):
        data = {"name": "Ann", "n": 1234.5}
        once = formatter.format("Dear ${name,-6}: ${n:n1} (${n:e2})", data)
        assert once == "Dear Ann   : 1,234.5 (1.23e+3)"
        assert formatter.format(once, data) == once


class TestFormatDispatch:
    """Format specifiers on placeholders."""

    def test_numeric_format(self, formatter):
        assert formatter.format("${n:d6}", {"n": 1234}) == "001234"
        assert formatter.format("${n:x}", {"n": -1234}) == "-4d2"
        assert formatter.format("${n:p0}", {"n": 0.5}) == "50%"

    def test_empty_format_on_number(self, formatter):
        assert formatter.format("${n:}", {"n": 1234567.25}) == "1234567.25"

    def test_invalid_numeric_format(self, formatter):
        with pytest.raises(InvalidFormatError) as exc_info:
            formatter.format("${key:z}", {"key": 1})

        assert exc_info.value.format == "z"
        assert "numeric" in str(exc_info.value)

    def test_format_on_non_numeric_value(self, formatter):
        with pytest.raises(InvalidFormatError) as exc_info:
            formatter.format("${name:d}", {"name": "Ann"})

        assert exc_info.value.format == "d"
        assert str(exc_info.value) == "Invalid format string for non-numeric type: d"

    def test_empty_format_on_non_numeric_value(self, formatter):
        assert formatter.format("${name:}", {"name": "Ann"}) == "Ann"

    def test_bool_is_not_numeric(self, formatter):
        with pytest.raises(InvalidFormatError):
            formatter.format("${flag:d}", {"flag": True})

    def test_errors_are_user_errors(self, formatter):
        with pytest.raises(CFUserError):
            formatter.format("${n:q}", {"n": 1})


class TestAlignment:
    """Alignment padding."""

    @pytest.mark.parametrize("template, expected", [
        ("[${k,5}]", "[   ab]"),
        ("[${k,-5}]", "[ab   ]"),
        ("[${k,2}]", "[ab]"),
        ("[${k,-1}]", "[ab]"),
        ("[${k,0}]", "[ab]"),
        ("[${k,}]", "[ab]"),
        ("[${k, 4}]", "[  ab]"),
        ("[${k,+4}]", "[  ab]"),
        ("[${k, -4 }]", "[ab  ]"),
        ("[${k,3px}]", "[ ab]"),
    ])
    def test_padding(self, formatter, template, expected):
        assert formatter.format(template, {"k": "ab"}) == expected

    def test_no_truncation(self, formatter):
        assert formatter.format("${k,3}", {"k": "abcdef"}) == "abcdef"

    def test_alignment_with_format(self, formatter):
        assert formatter.format("|${n,10:n2}|", {"n": 1234.5}) == "|   1,234.5|"
        assert formatter.format("|${n,-8:d4}|", {"n": 7}) == "|0007    |"

    @pytest.mark.parametrize("alignment", ["abc", " ", "-", "+x", ".5"])
    def test_invalid_alignment(self, formatter, alignment):
        with pytest.raises(InvalidAlignmentError) as exc_info:
            formatter.format("${key," + alignment + "}", {"key": "v"})

        assert exc_info.value.alignment == alignment
        assert str(exc_info.value) == f"Invalid alignment: {alignment}"

    def test_length_counts_code_points(self, formatter):
        assert formatter.format("${k,4}", {"k": "é"}) == "   é"


class TestCallbackSubstitution:
    """Substitution from a callback."""

    def test_callback_is_called_once(self, formatter):
        fn = Mock(return_value="hello")

        assert formatter.format("Hello ${key}!", fn) == "Hello hello!"
        fn.assert_called_once_with("key", None)

    def test_callback_receives_format(self, formatter):
        fn = Mock(return_value="x")

        formatter.format("${a,3:x2} ${b:}", fn)

        assert fn.call_args_list[0].args == ("a", "x2")
        assert fn.call_args_list[1].args == ("b", "")

    def test_callback_called_per_occurrence(self, formatter):
        fn = Mock(return_value=1)
        formatter.format("${a}${a}${a}", fn)
        assert fn.call_count == 3

    def test_callback_none_is_missing(self, formatter):
        with pytest.raises(KeyNotFoundError) as exc_info:
            formatter.format("Hello ${who}", lambda key, spec: None)
        assert exc_info.value.key == "who"

    def test_callback_numeric_result_is_formatted(self, formatter):
        assert formatter.format("${n:d4}", lambda key, spec: 42) == "0042"

    def test_callback_text_result_with_format(self, formatter):
        """A callback may format values itself and return text."""
        def fn(key, spec):
            return f"<{key}|{spec}>"

        assert formatter.format("${a:whatever}", fn) == "<a|whatever>"

    def test_callback_numeric_result_with_invalid_format(self, formatter):
        with pytest.raises(InvalidFormatError):
            formatter.format("${n:zz}", lambda key, spec: 1)

    def test_callback_with_alignment(self, formatter):
        assert formatter.format("[${a,-4}]", lambda key, spec: key.upper()) == "[A   ]"


class TestHelpers:

    def test_parse_alignment(self):
        assert parse_alignment("12") == 12
        assert parse_alignment("  -3") == -3
        assert parse_alignment("+7") == 7
        assert parse_alignment("08") == 8

    def test_pad(self):
        assert pad("ab", 4) == "  ab"
        assert pad("ab", -4) == "ab  "
        assert pad("ab", 0) == "ab"

    def test_format_value_method(self, formatter):
        assert formatter.format_value(255, "X") == "FF"
        assert formatter.format_value("text", "") == "text"
