"""Tests for the text-preserving property list parser."""

from pathlib import Path

import pytest

from glyphspack.core.parser import PlistParser, is_unquoted_char, parse, parse_file
from glyphspack.domain import Root, ValueKind
from glyphspack.exceptions import FileReadError, PlistSyntaxError


class TestParseValues:
    """Tests for the structured values produced by the parser."""

    def test_simple_dict(self):
        """Test parsing a flat dictionary."""
        root = parse(Root.DICT, '{\nfamilyName = "Test Sans";\nunitsPerEm = 1000;\n}\n')

        assert root.kind == ValueKind.DICT
        assert [entry.key for entry in root.entries] == ["familyName", "unitsPerEm"]
        assert root.get("familyName").text == "Test Sans"
        assert root.get("unitsPerEm").text == "1000"

    def test_nested_values(self):
        """Test parsing nested dictionaries and arrays."""
        root = parse(Root.DICT, "{glyphs = ({glyphname = A; nodes = ((1,2,l));});}")

        glyphs = root.get("glyphs")
        assert glyphs.is_array
        glyph = glyphs.elements[0]
        assert glyph.is_dict
        assert glyph.get("glyphname").text == "A"
        node = glyph.get("nodes").elements[0]
        assert [element.text for element in node.elements] == ["1", "2", "l"]

    def test_array_root(self):
        """Test parsing an array document."""
        root = parse(Root.ARRAY, "(\nB,\na,\nA\n)")

        assert root.is_array
        assert [element.text for element in root.elements] == ["B", "a", "A"]

    def test_trailing_comma(self):
        """Test that a trailing comma in an array is accepted."""
        root = parse(Root.ARRAY, "(a, b,)")
        assert [element.text for element in root.elements] == ["a", "b"]
        assert root.body == "a, b"

    def test_empty_containers(self):
        """Test empty dictionaries and arrays."""
        d = parse(Root.DICT, "{}")
        a = parse(Root.ARRAY, "( )")

        assert d.entries == []
        assert d.body == ""
        assert a.elements == []
        assert a.body == ""

    def test_unquoted_tokens(self):
        """Test unquoted tokens with punctuation."""
        root = parse(Root.DICT, "{a = .notdef; b = -16.5; c = caroncomb.case; d = $x+y/z:1_2;}")

        values = [entry.value.text for entry in root.entries]
        assert values == [".notdef", "-16.5", "caroncomb.case", "$x+y/z:1_2"]

    def test_unicode_unquoted_token(self):
        """Test that non-ASCII letters are valid in unquoted tokens."""
        root = parse(Root.DICT, "{name = Ärger;}")
        assert root.get("name").text == "Ärger"

    def test_quoted_keys(self):
        """Test quoted dictionary keys."""
        root = parse(Root.DICT, '{"com.example.key" = 1;}')
        assert root.entries[0].key == "com.example.key"

    def test_escapes_not_decoded(self):
        """Test that escape sequences are kept verbatim."""
        root = parse(Root.DICT, r'{note = "say \"hi\"\n\\";}')

        assert root.get("note").text == r"say \"hi\"\n\\"
        assert root.get("note").code == r'"say \"hi\"\n\\"'

    def test_duplicate_keys_are_kept(self):
        """Test that duplicate keys are preserved in source order."""
        root = parse(Root.DICT, "{a = 1; b = 2; a = 3;}")

        assert [entry.key for entry in root.entries] == ["a", "b", "a"]
        assert root.get("a").text == "1"
        assert [entry.value.text for entry in root.find_all("a")] == ["1", "3"]

    def test_comments_are_whitespace(self):
        """Test that line and block comments are skipped."""
        root = parse(Root.DICT, "// header\n{ /* x */ a = 1; // tail\n}")
        assert [entry.key for entry in root.entries] == ["a"]


class TestParseSpans:
    """Tests for the verbatim source spans kept by the parser."""

    def test_entry_code_keeps_formatting(self):
        """Test that entry code is the exact source text."""
        root = parse(Root.DICT, "{\n  pos   =  ( 1 ,2 )  ;\n}")

        entry = root.entries[0]
        assert entry.code == "pos   =  ( 1 ,2 )  ;"
        assert entry.value.code == "( 1 ,2 )"
        assert entry.value.body == "1 ,2"

    def test_dict_code_includes_braces(self):
        """Test that a nested dictionary's code includes its braces."""
        text = "{glyphs = (\n{\nglyphname = A;\nunicode = 65;\n},\n{\nglyphname = B;\n}\n);}"
        root = parse(Root.DICT, text)

        first, second = root.get("glyphs").elements
        assert first.code == "{\nglyphname = A;\nunicode = 65;\n}"
        assert first.body == "glyphname = A;\nunicode = 65;"
        assert second.code == "{\nglyphname = B;\n}"

    def test_array_body(self):
        """Test that the array body excludes parentheses and outer whitespace."""
        root = parse(Root.DICT, "{\nD = (\n\"/A/B\",\n\"abc\"\n);}")

        display = root.get("D")
        assert display.body == '"/A/B",\n"abc"'
        assert display.code == '(\n"/A/B",\n"abc"\n)'

    def test_quoted_code_includes_quotes(self):
        """Test that a quoted string's code includes its quotes."""
        root = parse(Root.DICT, '{glyphname = "A";}')

        name = root.get("glyphname")
        assert name.text == "A"
        assert name.code == '"A"'

    def test_root_code_excludes_outer_whitespace(self):
        """Test that the root span starts and ends at its delimiters."""
        root = parse(Root.DICT, "\n  {a = 1;}\n\n")
        assert root.code == "{a = 1;}"

    def test_slices_share_source(self):
        """Test that all slices of one parse reference the same buffer."""
        text = "{a = (b, {c = d;});}"
        root = parse(Root.DICT, text)

        nested = root.get("a").elements[1]
        assert root.source is text
        assert nested.source is text
        assert nested.entries[0].source is text


class TestParseErrors:
    """Tests for syntax errors and their positions."""

    def test_missing_semicolon_position(self):
        """Test line and column of a missing semicolon."""
        with pytest.raises(PlistSyntaxError) as exc_info:
            parse(Root.DICT, "{\na = 1\n}")

        error = exc_info.value
        assert error.line == 3
        assert error.column == 1
        assert error.offset == 8
        assert "';'" in error.reason

    def test_wrong_root_kind(self):
        """Test that the root kind is enforced."""
        with pytest.raises(PlistSyntaxError, match="expected '\\('"):
            parse(Root.ARRAY, "{a = 1;}")
        with pytest.raises(PlistSyntaxError, match="expected '\\{'"):
            parse(Root.DICT, "(a)")

    def test_trailing_content(self):
        """Test that content after the root value is rejected."""
        with pytest.raises(PlistSyntaxError, match="after dict"):
            parse(Root.DICT, "{a = 1;} b")

    def test_unterminated_string(self):
        """Test an unterminated quoted string reports where it starts."""
        with pytest.raises(PlistSyntaxError, match="unterminated quoted string") as exc_info:
            parse(Root.DICT, '{a = "abc;}')
        assert exc_info.value.column == 6

    def test_unterminated_containers(self):
        """Test unterminated dictionaries and arrays."""
        with pytest.raises(PlistSyntaxError, match="unterminated dictionary"):
            parse(Root.DICT, "{a = 1;")
        with pytest.raises(PlistSyntaxError, match="unterminated array"):
            parse(Root.ARRAY, "(a, b")

    def test_unterminated_comment(self):
        """Test an unterminated block comment."""
        with pytest.raises(PlistSyntaxError, match="unterminated comment"):
            parse(Root.DICT, "{a = 1; /* open")

    def test_missing_comma(self):
        """Test array elements without a separator."""
        with pytest.raises(PlistSyntaxError, match="expected ',' or '\\)'"):
            parse(Root.ARRAY, "(a b)")

    def test_missing_value(self):
        """Test an entry without a value."""
        with pytest.raises(PlistSyntaxError, match="expected value"):
            parse(Root.DICT, "{a = ;}")

    def test_deep_nesting(self):
        """Test that nesting deeper than the interpreter stack is a syntax error."""
        text = "{a = " + "(" * 3000 + ")" * 3000 + ";}"

        with pytest.raises(PlistSyntaxError, match="nesting too deep") as exc_info:
            parse(Root.DICT, text)
        assert exc_info.value.line == 1

    def test_moderate_nesting(self):
        root = parse(Root.ARRAY, "(" * 50 + ")" * 50)
        assert len(root.elements) == 1

    def test_empty_input(self):
        """Test that empty input is not a document."""
        with pytest.raises(PlistSyntaxError, match="end of input"):
            parse(Root.DICT, "")

    def test_error_names_path(self):
        """Test that the path is part of the error message."""
        path = Path("Font.glyphspackage/order.plist")
        with pytest.raises(PlistSyntaxError) as exc_info:
            parse(Root.ARRAY, "(a", path)

        assert exc_info.value.path == path
        assert str(path) in str(exc_info.value)

    def test_with_path(self):
        """Test attaching a path to an existing error."""
        error = PlistSyntaxError("bad", 1, 2, 1)
        named = error.with_path(Path("x.plist"))

        assert named.path == Path("x.plist")
        assert (named.line, named.column, named.offset) == (1, 2, 1)
        assert "x.plist:1:2" in str(named)


class TestParseFile:
    """Tests for parse_file."""

    def test_parse_file(self, tmp_path):
        """Test reading and parsing a file."""
        path = tmp_path / "fontinfo.plist"
        path.write_text("{\nfamilyName = Test;\n}\n", encoding="utf-8")

        root = parse_file(path, Root.DICT)
        assert root.get("familyName").text == "Test"

    def test_parse_file_keeps_crlf(self, tmp_path):
        """Test that line endings are not translated."""
        path = tmp_path / "fontinfo.plist"
        path.write_bytes(b"{\r\na = (\r\n1\r\n);\r\n}\r\n")

        root = parse_file(path, Root.DICT)
        assert root.entries[0].code == "a = (\r\n1\r\n);"

    def test_parse_missing_file(self, tmp_path):
        """Test that a missing file raises FileReadError with its path."""
        path = tmp_path / "missing.plist"
        with pytest.raises(FileReadError) as exc_info:
            parse_file(path, Root.DICT)
        assert exc_info.value.path == path

    def test_syntax_error_names_file(self, tmp_path):
        """Test that syntax errors name the parsed file."""
        path = tmp_path / "bad.plist"
        path.write_text("{a = 1}", encoding="utf-8")

        with pytest.raises(PlistSyntaxError) as exc_info:
            parse_file(path, Root.DICT)
        assert exc_info.value.path == path


class TestPlistParser:
    """Tests for the PlistParser class and helpers."""

    def test_parser_position_at_end(self):
        """Test that a successful parse consumes the whole buffer."""
        parser = PlistParser("{a = 1;}\n")
        parser.parse(Root.DICT)
        assert parser.pos == len(parser.source)

    @pytest.mark.parametrize("char", ["a", "Z", "0", "_", "$", "+", "/", ":", ".", "-"])
    def test_unquoted_chars(self, char):
        assert is_unquoted_char(char)

    @pytest.mark.parametrize("char", ["{", "}", "(", ")", "=", ";", ",", '"', " ", "\n"])
    def test_structural_chars(self, char):
        assert not is_unquoted_char(char)
