"""Tests for line tokenizing."""

from roster.tokenizer import split_header, tokenize


class TestTokenize:
    def test_plain_fields(self):
        assert tokenize("a,b,c") == ["a", "b", "c"]

    def test_quoted_delimiter_does_not_split(self):
        assert tokenize('a,"b,c",d') == ["a", "b,c", "d"]

    def test_empty_line_is_one_empty_field(self):
        assert tokenize("") == [""]

    def test_consecutive_delimiters(self):
        assert tokenize("a,,b,") == ["a", "", "b", ""]

    def test_mid_field_quote_is_stripped(self):
        assert tokenize('ab"cd,e') == ["abcd,e"]
        assert tokenize('ab"c"d,e') == ["abcd", "e"]

    def test_unterminated_quote_swallows_rest(self):
        assert tokenize('a,"b,c,d') == ["a", "b,c,d"]

    def test_whitespace_is_kept(self):
        assert tokenize(" a , b ") == [" a ", " b "]


class TestSplitHeader:
    def test_names_are_trimmed(self):
        assert split_header(" email , password,role\r") == ["email", "password", "role"]

    def test_quotes_are_not_interpreted(self):
        assert split_header('"a,b",c') == ['"a', 'b"', "c"]
