"""Tests for the TOON Python implementation."""

import pytest
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum

import sys
sys.path.insert(0, str(__file__).rsplit('/', 2)[0])

from toon import (
    TValue, TType, t, field, MapEntry,
    encode, decode, parse,
    normalize, to_python,
    EncodeOptions, DecodeOptions,
    ToonDecodeError,
    lenient_decode_options,
    pipe_encode_options,
    tab_encode_options,
)
from toon.strings import (
    escape_string,
    find_unquoted,
    is_safe_unquoted,
    is_valid_unquoted_key,
    split_unquoted,
    unescape_string,
)
from toon.primitives import encode_primitive, format_float, format_header
from toon.decoder import LineCursor, parse_header, scan_lines
from toon.writer import LineWriter


class TestTValue:
    """Tests for TValue type."""

    def test_null(self):
        v = TValue.null()
        assert v.type == TType.NULL
        assert v.is_null()
        assert v.is_primitive()

    def test_scalars(self):
        assert TValue.bool_(True).as_bool() is True
        assert TValue.int_(42).as_int() == 42
        assert TValue.float_(2.5).as_float() == 2.5
        assert TValue.str_("hi").as_str() == "hi"

    def test_wrong_accessor(self):
        with pytest.raises(TypeError):
            TValue.int_(1).as_str()

    def test_map_keeps_order(self):
        v = t.map(field("z", t.int(1)), field("a", t.int(2)))
        assert v.keys() == ["z", "a"]
        assert v.get("a").as_int() == 2
        assert v.get("missing") is None

    def test_map_set_existing_key_keeps_position(self):
        v = t.map(field("a", t.int(1)), field("b", t.int(2)))
        v.set("a", t.int(3))
        assert v.keys() == ["a", "b"]
        assert v.get("a").as_int() == 3

    def test_empty_map_and_list_differ(self):
        assert TValue.map_() != TValue.list_()
        assert len(TValue.map_()) == 0

    def test_equality_respects_key_order(self):
        a = t.map(MapEntry("x", t.int(1)), MapEntry("y", t.int(2)))
        b = t.map(MapEntry("y", t.int(2)), MapEntry("x", t.int(1)))
        assert a != b
        assert a == t.map(MapEntry("x", t.int(1)), MapEntry("y", t.int(2)))

    def test_list(self):
        v = t.list(t.int(1), t.str("a"))
        assert len(v) == 2
        assert v.index(1).as_str() == "a"
        with pytest.raises(IndexError):
            v.index(2)

    def test_append(self):
        v = TValue.list_()
        v.append(t.int(1))
        v.append(t.null())
        assert v == t.list(t.int(1), t.null())
        with pytest.raises(TypeError):
            TValue.map_().append(t.int(1))


class TestStringUtils:
    """Tests for quoting and escaping."""

    @pytest.mark.parametrize("s", [
        "", "null", "true", "false", "42", "-3.5", "1e10", "0123",
        " leading", "trailing ", "a:b", "a-b", "[x]", "{x}", "tab\there", "nl\nx",
        "bell\x07", "a,b", 'say "hi"', "back\\slash",
    ])
    def test_needs_quotes(self, s):
        assert not is_safe_unquoted(s, ",")

    @pytest.mark.parametrize("s", ["hello", "hello world", "08", "NaN", "1a", "a|b", "你好", "x.y"])
    def test_safe_unquoted(self, s):
        assert is_safe_unquoted(s, ",")

    def test_delimiter_sensitive(self):
        assert is_safe_unquoted("a,b", "|")
        assert not is_safe_unquoted("a|b", "|")

    def test_valid_keys(self):
        assert is_valid_unquoted_key("name")
        assert is_valid_unquoted_key("_private.field2")
        assert not is_valid_unquoted_key("2fast")
        assert not is_valid_unquoted_key("my key")
        assert not is_valid_unquoted_key("")

    def test_escape(self):
        assert escape_string('a"b\\c') == 'a\\"b\\\\c'
        assert escape_string("l1\nl2\r\t") == "l1\\nl2\\r\\t"
        assert escape_string("\x00\x7f") == "\\u0000\\u007f"

    def test_unescape(self):
        assert unescape_string('a\\"b\\\\c\\n') == 'a"b\\c\n'
        assert unescape_string("\\u0041\\u00e9") == "Aé"

    @pytest.mark.parametrize("text", ["abc\\", "\\q", "\\u12", "\\u12zz"])
    def test_unescape_errors(self, text):
        with pytest.raises(ToonDecodeError):
            unescape_string(text)

    def test_quote_aware_scanning(self):
        assert find_unquoted('"a:b": 1', ":") == 5
        assert find_unquoted('"a:b', ":") == -1
        assert split_unquoted('a,"b,c",d', ",") == ["a", '"b,c"', "d"]
        assert split_unquoted('"x\\",y",z', ",") == ['"x\\",y"', "z"]


class TestPrimitives:
    """Tests for primitive and header formatting."""

    def test_scalars(self):
        assert encode_primitive(TValue.null()) == "null"
        assert encode_primitive(TValue.bool_(False)) == "false"
        assert encode_primitive(TValue.int_(-7)) == "-7"
        assert encode_primitive(TValue.str_("null")) == '"null"'

    @pytest.mark.parametrize("f,expected", [
        (3.14, "3.14"),
        (2.0, "2"),
        (0.0, "0"),
        (-0.0, "0"),
        (1e-10, "0.0000000001"),
        (1.5e-7, "0.00000015"),
        (1e16, "10000000000000000"),
        (-2.5e20, "-250000000000000000000"),
        (123.456, "123.456"),
    ])
    def test_float_is_fixed_point(self, f, expected):
        assert format_float(f) == expected

    def test_header(self):
        assert format_header(3) == "[3]:"
        assert format_header(3, key="items") == "items[3]:"
        assert format_header(3, delimiter="\t") == "[3\t]:"
        assert format_header(3, delimiter="|", length_marker="#") == "[#3|]:"
        assert format_header(2, key="users", fields=["id", "name"]) == "users[2,]{id,name}:"

    def test_header_fields_always_comma_joined(self):
        header = format_header(2, fields=["id", "full name"], delimiter="|")
        assert header == '[2|]{id,"full name"}:'

    def test_header_quotes_key(self):
        assert format_header(1, key="my list") == '"my list"[1]:'


class TestNormalize:
    """Tests for native value normalization."""

    def test_primitives(self):
        assert normalize(None).is_null()
        assert normalize(True).type == TType.BOOL
        assert normalize(5).type == TType.INT
        assert normalize(5.5).type == TType.FLOAT
        assert normalize("s").type == TType.STR

    def test_non_finite_floats(self):
        assert normalize(float("nan")).is_null()
        assert normalize(float("inf")).is_null()
        assert normalize(Decimal("NaN")).is_null()

    def test_negative_zero(self):
        v = normalize(-0.0)
        assert v.as_float() == 0.0
        assert str(v.as_float()) == "0.0"

    def test_datetime(self):
        dt = datetime(2025, 1, 13, 12, 0, 0, tzinfo=timezone.utc)
        assert normalize(dt).as_str() == "2025-01-13T12:00:00+00:00"
        assert normalize(date(2024, 2, 29)).as_str() == "2024-02-29"

    def test_mapping_keys_stringified(self):
        v = normalize({1: "a", "b": 2})
        assert v.keys() == ["1", "b"]

    def test_sequences(self):
        assert normalize((1, 2)).type == TType.LIST
        assert len(normalize(frozenset({1}))) == 1

    def test_empty_dict_is_map(self):
        assert normalize({}).type == TType.MAP
        assert normalize([]).type == TType.LIST

    def test_hooks(self):
        class WithToDict:
            def to_dict(self):
                return {"kind": "custom"}

        @dataclass
        class Point:
            x: int
            y: int

        assert to_python(normalize(WithToDict())) == {"kind": "custom"}
        assert to_python(normalize(Point(1, 2))) == {"x": 1, "y": 2}

    def test_hook_wins_over_callable(self):
        class Model:
            def to_dict(self):
                return {"a": 1}

            def __call__(self):
                return None

        assert encode({"m": Model()}) == "m:\n  a: 1"
        # The class itself is callable and has no bound hook
        assert normalize(Model).is_null()

    def test_enum(self):
        class Color(Enum):
            RED = "red"

        assert normalize(Color.RED).as_str() == "red"

    def test_unsupported_become_null(self):
        assert normalize(lambda: 1).is_null()
        assert normalize(b"bytes").is_null()
        assert normalize(object()).is_null()
        with open(__file__) as f:
            assert normalize(f).is_null()

    def test_to_python(self):
        v = t.map(field("a", t.list(t.int(1), t.null())))
        assert to_python(v) == {"a": [1, None]}


class TestLineWriter:
    """Tests for the line buffer."""

    def test_indentation(self):
        w = LineWriter(2)
        w.push(0, "a:")
        w.push(1, "b: 1")
        w.push(2, "c: 2")
        assert w.to_string() == "a:\n  b: 1\n    c: 2"

    def test_zero_indent_uses_single_space(self):
        w = LineWriter(0)
        w.push(0, "a:")
        w.push(2, "b")
        assert w.to_string() == "a:\n  b"


class TestEncode:
    """Tests for encoding."""

    def test_simple_object(self):
        assert encode({"name": "Alice", "age": 30}) == "name: Alice\nage: 30"

    def test_primitive_array(self):
        assert encode([1, 2, 3]) == "[3]: 1,2,3"

    def test_tabular_array(self):
        data = [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]
        assert encode(data) == "[2,]{id,name}:\n  1,Alice\n  2,Bob"

    def test_tabular_field_order_from_first_row(self):
        data = [{"a": 1, "b": 2}, {"b": 3, "a": 4}]
        assert encode(data) == "[2,]{a,b}:\n  1,2\n  4,3"

    def test_keyed_tabular(self):
        data = {"users": [{"id": 1, "ok": True}, {"id": 2, "ok": None}]}
        assert encode(data) == "users[2,]{id,ok}:\n  1,true\n  2,null"

    def test_empty_array(self):
        assert encode([]) == "[0]:"
        assert encode({"items": []}) == "items[0]:"

    def test_empty_object_at_root(self):
        assert encode({}) == ""

    def test_nested_empty_object(self):
        assert encode({"a": {}}) == "a:"

    def test_primitives(self):
        assert encode(None) == "null"
        assert encode(True) == "true"
        assert encode(False) == "false"
        assert encode(42) == "42"
        assert encode(1e-10) == "0.0000000001"
        assert encode(float("nan")) == "null"

    def test_strings(self):
        assert encode("hello") == "hello"
        assert encode("hello world") == "hello world"
        assert encode(" leading") == '" leading"'
        assert encode("trailing ") == '"trailing "'
        assert encode("") == '""'
        assert encode("123") == '"123"'
        assert encode("line1\nline2") == '"line1\\nline2"'

    def test_nested_object(self):
        data = {"user": {"name": "Alice", "age": 30}}
        assert encode(data) == "user:\n  name: Alice\n  age: 30"

    def test_quoted_keys(self):
        assert encode({"my key": 1, "x-y": 2}) == '"my key": 1\n"x-y": 2'

    def test_mixed_list(self):
        data = {"items": [1, "a", {"x": 1}, [2, 3]]}
        expected = "\n".join([
            "items[4]:",
            "  - 1",
            "  - a",
            "  - x: 1",
            "  - [2]: 2,3",
        ])
        assert encode(data) == expected

    def test_heterogeneous_objects_use_list(self):
        assert encode([{"a": 1}, {"b": 2}]) == "[2]:\n  - a: 1\n  - b: 2"

    def test_objects_with_nested_values_use_list(self):
        data = [{"id": 1, "tags": ["x"]}, {"id": 2, "tags": []}]
        expected = "\n".join([
            "[2]:",
            "  - id: 1",
            "    tags[1]: x",
            "  - id: 2",
            "    tags[0]:",
        ])
        assert encode(data) == expected

    def test_list_item_first_field_array(self):
        data = {"items": [{"tags": ["a", "b"], "id": 1}]}
        assert encode(data) == "items[1]:\n  - tags[2]: a,b\n    id: 1"

    def test_list_item_first_field_table(self):
        data = {"groups": [{"rows": [{"a": 1}, {"a": 2}], "n": 2}]}
        expected = "\n".join([
            "groups[1]:",
            "  - rows[2,]{a}:",
            "      1",
            "      2",
            "    n: 2",
        ])
        assert encode(data) == expected

    def test_list_item_first_field_object(self):
        data = {"items": [{"meta": {"k": 1}, "id": 2}]}
        expected = "\n".join([
            "items[1]:",
            "  - meta:",
            "      k: 1",
            "    id: 2",
        ])
        assert encode(data) == expected

    def test_empty_object_item(self):
        assert encode([{}, 1]) == "[2]:\n  -\n  - 1"

    def test_array_of_arrays(self):
        assert encode([[1, 2], [3]]) == "[2]:\n  - [2]: 1,2\n  - [1]: 3"
        assert encode([[]]) == "[1]:\n  - [0]:"

    def test_deeply_nested_arrays(self):
        expected = "\n".join([
            "[1]:",
            "  - [2]:",
            "    - [1]: 1",
            "    - [1]: 2",
        ])
        assert encode([[[1], [2]]]) == expected

    def test_tab_delimiter(self):
        assert encode([1, 2, 3], {"delimiter": "\t"}) == "[3\t]: 1\t2\t3"

    def test_pipe_delimiter_table(self):
        data = [{"a": "x,y", "b": "p|q"}]
        assert encode(data, pipe_encode_options()) == '[1|]{a,b}:\n  x,y|"p|q"'

    def test_length_marker(self):
        assert encode([1, 2, 3], {"lengthMarker": "#"}) == "[#3]: 1,2,3"
        assert encode({"a": [{"x": 1}]}, EncodeOptions(length_marker="#")) == "a[#1,]{x}:\n  1"

    def test_indent_width(self):
        assert encode({"a": {"b": 1}}, EncodeOptions(indent=4)) == "a:\n    b: 1"
        assert encode({"a": {"b": 1}}, EncodeOptions(indent=0)) == "a:\n b: 1"

    def test_preserves_key_order(self):
        assert encode({"z": 1, "a": 2}) == "z: 1\na: 2"

    def test_accepts_tvalue(self):
        assert encode(t.list(t.int(1), t.int(2))) == "[2]: 1,2"

    def test_unsupported_values_are_null(self):
        assert encode({"f": print, "b": b"x"}) == "f: null\nb: null"


class TestDecode:
    """Tests for decoding."""

    def test_simple_object(self):
        assert decode("name: Alice\nage: 30") == {"name": "Alice", "age": 30}

    def test_primitive_array(self):
        assert decode("[3]: 1,2,3") == [1, 2, 3]

    def test_tabular_array(self):
        result = decode("[2,]{id,name}:\n  1,Alice\n  2,Bob")
        assert result == [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]

    def test_nested_object(self):
        assert decode("user:\n  name: Alice\n  age: 30") == {"user": {"name": "Alice", "age": 30}}

    def test_primitives(self):
        assert decode("null") is None
        assert decode("true") is True
        assert decode("false") is False
        assert decode("42") == 42
        assert isinstance(decode("42"), int)
        assert decode("3.14") == 3.14
        assert isinstance(decode("1.0"), float)
        assert decode("-1.5e3") == -1500.0
        assert decode("hello") == "hello"

    def test_quoted_strings(self):
        assert decode('"hello world"') == "hello world"
        assert decode('"null"') == "null"
        assert decode('"123"') == "123"
        assert decode('"a:b"') == "a:b"
        assert decode('"tab\\there"') == "tab\there"

    def test_leading_zero_stays_string(self):
        assert decode("a: 05") == {"a": "05"}

    def test_non_ascii_digits_are_not_numbers(self):
        assert decode("a: 1\u0661") == {"a": "1\u0661"}
        assert decode("[2]: \u0661,2") == ["\u0661", 2]

    def test_array_with_key(self):
        assert decode("items[2]: apple,banana") == {"items": ["apple", "banana"]}

    def test_empty(self):
        assert decode("") == []
        assert decode("\n\n") == []
        assert decode("[0]:") == []
        assert decode("items[0]:") == {"items": []}

    def test_empty_value_is_empty_object(self):
        assert decode("a:") == {"a": {}}
        assert decode("a:\nb: 1") == {"a": {}, "b": 1}

    def test_blank_lines_and_crlf(self):
        assert decode("a: 1\r\n\r\nb: 2\r\n") == {"a": 1, "b": 2}

    def test_quoted_keys(self):
        assert decode('"my key": 1\n"a\\"b": 2') == {"my key": 1, 'a"b': 2}
        assert decode('"x:y"[2]: 1,2') == {"x:y": [1, 2]}

    def test_quoted_values_with_delimiter(self):
        assert decode('[3]: "a,b",c,""') == ["a,b", "c", ""]

    def test_length_marker(self):
        assert decode("[#3]: 1,2,3") == [1, 2, 3]
        assert decode("a[#2|]: x|y") == {"a": ["x", "y"]}

    def test_tab_delimiter(self):
        assert decode("[3\t]: 1\t2\t3") == [1, 2, 3]
        assert decode("[2\t]{a,b}:\n  1\tx y\n  2\tz") == [
            {"a": 1, "b": "x y"},
            {"a": 2, "b": "z"},
        ]

    def test_list_items(self):
        text = "\n".join([
            "items[4]:",
            "  - 1",
            "  - a",
            "  - x: 1",
            "    y: 2",
            "  - [2]: 2,3",
        ])
        assert decode(text) == {"items": [1, "a", {"x": 1, "y": 2}, [2, 3]]}

    def test_list_item_nested_under_first_field(self):
        text = "\n".join([
            "items[1]:",
            "  - meta:",
            "      k: 1",
            "    rows[2,]{a}:",
            "      1",
            "      2",
            "  ",
        ])
        assert decode(text) == {"items": [{"meta": {"k": 1}, "rows": [{"a": 1}, {"a": 2}]}]}

    def test_bare_dash_is_empty_object(self):
        assert decode("[2]:\n  -\n  - 1") == [{}, 1]

    def test_nested_arrays(self):
        text = "[1]:\n  - [2]:\n    - [1]: 1\n    - [1]: 2"
        assert decode(text) == [[[1], [2]]]

    def test_indent_option(self):
        assert decode("a:\n    b: 1", {"indent": 4}) == {"a": {"b": 1}}

    def test_parse_returns_tvalue(self):
        v = parse("a[2]: 1,x")
        assert v.type == TType.MAP
        items = v.get("a").as_list()
        assert items[0].as_int() == 1
        assert items[1].as_str() == "x"

    def test_order_preserved(self):
        assert list(decode("z: 1\na: 2\nm: 3")) == ["z", "a", "m"]


class TestDecodeErrors:
    """Tests for strict mode and malformed input."""

    def test_length_mismatch_strict(self):
        with pytest.raises(ToonDecodeError) as exc:
            decode("items[5]: a,b,c", {"strict": True})
        assert "expected 5" in str(exc.value)
        assert "got 3" in str(exc.value)
        assert exc.value.line == 1

    def test_length_mismatch_lenient(self):
        assert decode("items[5]: a,b,c", {"strict": False}) == {"items": ["a", "b", "c"]}

    def test_tabular_length_mismatch(self):
        text = "[3,]{a}:\n  1\n  2"
        with pytest.raises(ToonDecodeError):
            decode(text)
        assert decode(text, lenient_decode_options()) == [{"a": 1}, {"a": 2}]

    def test_list_length_mismatch(self):
        with pytest.raises(ToonDecodeError):
            decode("[3]:\n  - a\n  - b")

    def test_partial_row(self):
        text = "[1,]{a,b,c}:\n  1,2"
        with pytest.raises(ToonDecodeError) as exc:
            decode(text)
        assert exc.value.line == 2
        assert decode(text, DecodeOptions(strict=False)) == [{"a": 1, "b": 2, "c": None}]

    def test_unterminated_string(self):
        with pytest.raises(ToonDecodeError) as exc:
            decode('a: 1\nb: "oops')
        assert exc.value.line == 2
        assert str(exc.value).startswith("Line 2:")

    def test_bad_escape(self):
        with pytest.raises(ToonDecodeError):
            decode('a: "bad \\q"')

    def test_bad_unicode_escape(self):
        with pytest.raises(ToonDecodeError):
            decode('a: "\\u12"')

    def test_missing_colon(self):
        with pytest.raises(ToonDecodeError) as exc:
            decode("a: 1\nb")
        assert exc.value.line == 2
        assert "colon" in str(exc.value)

    def test_non_item_in_list(self):
        text = "[2]:\n  - a\n  b"
        with pytest.raises(ToonDecodeError):
            decode(text)

    def test_trailing_content_after_root_array(self):
        text = "[2]: a,b\nextra: 1"
        with pytest.raises(ToonDecodeError):
            decode(text)
        assert decode(text, {"strict": False}) == ["a", "b"]

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            decode('"unterminated')


class TestOptions:
    """Tests for option validation."""

    def test_defaults(self):
        opts = EncodeOptions()
        assert opts.indent == 2
        assert opts.delimiter == ","
        assert opts.length_marker is None
        assert DecodeOptions().strict is True

    def test_delimiter_names(self):
        assert EncodeOptions(delimiter="tab").delimiter == "\t"
        assert tab_encode_options().delimiter == "\t"

    @pytest.mark.parametrize("kwargs", [
        {"indent": -1},
        {"delimiter": ";"},
        {"length_marker": "##"},
        {"length_marker": "5"},
    ])
    def test_invalid_encode_options(self, kwargs):
        with pytest.raises(ValueError):
            EncodeOptions(**kwargs)

    def test_invalid_decode_indent(self):
        with pytest.raises(ValueError):
            DecodeOptions(indent=0)

    def test_length_marker_off(self):
        assert EncodeOptions(length_marker=False).length_marker is None

    def test_options_are_immutable(self):
        opts = EncodeOptions()
        with pytest.raises(Exception):
            opts.indent = 4


class TestLineScanning:
    """Tests for line preprocessing and header parsing."""

    def test_scan_lines(self):
        lines = scan_lines("a:\n\n   b: 1\n    c: 2", 2)
        assert [(l.depth, l.content, l.line_no) for l in lines] == [
            (0, "a:", 1),
            (1, "b: 1", 3),
            (2, "c: 2", 4),
        ]

    def test_cursor(self):
        cursor = LineCursor(scan_lines("a:\n  b: 1\nc: 2", 2))
        assert cursor.peek().content == "a:"
        cursor.advance()
        assert not cursor.at_depth_boundary(1)
        cursor.advance()
        assert cursor.at_depth_boundary(1)
        cursor.advance()
        assert cursor.at_end()
        assert cursor.peek() is None

    def test_parse_header(self):
        h = parse_header("users[#2|]{id,name}: ")
        assert h.key == "users"
        assert h.length == 2
        assert h.delimiter == "|"
        assert h.fields == ["id", "name"]
        assert h.inline is None

    def test_parse_header_inline(self):
        h = parse_header("[3]: 1,2,3")
        assert h.key is None
        assert h.inline == "1,2,3"

    def test_not_a_header(self):
        assert parse_header("a: 1") is None
        assert parse_header('a: "[1]:"') is None
        assert parse_header('"k": 1') is None
        assert parse_header("a[x]: 1") is None
        assert parse_header("a[1\u0661]: x") is None


class TestRoundTrip:
    """Encode/decode round trips over representative documents."""

    @pytest.mark.parametrize("data", [
        {"name": "Alice", "age": 30, "tags": ["php", "toon", "coding"], "meta": {"active": True, "score": 95.5}},
        [{"id": 1, "name": "Alice", "score": 95}, {"id": 2, "name": "Bob", "score": 87}],
        {"a": {"b": {"c": [1, {"d": [[], [{}]]}]}}},
        [None, True, 1.5, "x", [], {}, {"k": []}],
        {"weird keys": {"": 1, "a b": 2, "1": 3, "-": [4]}},
        {"s": ["", " ", "null", "-", "a\"b", "c\\d", "\x01", "é", "1e5", "0012"]},
        [[1, [2, [3, []]]]],
        {"rows": [{"a": "x,y", "b": "p|q"}, {"a": "", "b": None}]},
        "just a string",
        12345678901234567890,
    ])
    def test_round_trip(self, data):
        for opts in (None, tab_encode_options(), pipe_encode_options(), EncodeOptions(length_marker="#")):
            text = encode(data, opts)
            assert decode(text) == data
            assert encode(decode(text), opts) == text

    def test_indent_round_trip(self):
        data = {"a": [{"b": {"c": 1}, "d": [1, 2]}]}
        assert decode(encode(data, EncodeOptions(indent=4)), DecodeOptions(indent=4)) == data
        assert decode(encode(data, EncodeOptions(indent=0)), DecodeOptions(indent=1)) == data


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
