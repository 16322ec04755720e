import pytest

from tweetsentiment.errors import MalformedRecordError
from tweetsentiment.features import leading_field, parse_code, parse_record, second_field, tokenize


class TestTokenize:
    def test_strips_punctuation_and_lowercases(self):
        assert tokenize("Hello, World! 123") == ["hello", "world", "123"]

    def test_empty_text(self):
        assert tokenize("") == []

    def test_punctuation_only_word_vanishes(self):
        assert tokenize("...") == []
        assert tokenize("wow ... !!! ok") == ["wow", "ok"]

    def test_inner_punctuation_is_removed_not_split(self):
        assert tokenize("don't @user #Happy") == ["dont", "user", "happy"]

    def test_whitespace_runs(self):
        assert tokenize("  a\t\tb \n c  ") == ["a", "b", "c"]

    def test_non_ascii_letters_are_dropped(self):
        assert tokenize("café naïve") == ["caf", "nave"]

    def test_idempotent(self):
        text = "I'm SO happy :) http://t.co/xyz 4ever!!"
        tokens = tokenize(text)
        assert tokenize(" ".join(tokens)) == tokens

    def test_no_empty_tokens(self):
        assert all(tokenize("-- a - b -- ?"))


class TestParseRecord:
    def test_takes_text_after_fifth_delimiter(self):
        assert parse_record("4,1,d,q,u,good great day") == ("4", "good great day")

    def test_keeps_delimiters_inside_text(self):
        assert parse_record("0,2,d,q,u,bad, sad, mad") == ("0", "bad, sad, mad")

    def test_fewer_than_five_delimiters_gives_empty_text(self):
        assert parse_record("4,1,d,q") == ("4", "")
        assert parse_record("4,1,d,q,u") == ("4", "")
        assert parse_record("lonely") == ("lonely", "")

    def test_empty_line(self):
        assert parse_record("") == ("", "")

    def test_line_terminator_is_not_text(self):
        assert parse_record("4,1,d,q,u,hi there\r\n") == ("4", "hi there")

    def test_custom_delimiter(self):
        assert parse_record("4|1|d|q|u|a|b", delimiter="|") == ("4", "a|b")


class TestParseCode:
    @pytest.mark.parametrize(
        "field, expected",
        [("4", 4), ("0", 0), (" 4", 4), ("4 ", 4), ("-1", -1), ("+7", 7), ("2abc", 2)],
    )
    def test_leading_integer(self, field, expected):
        assert parse_code(field) == expected

    @pytest.mark.parametrize("field", ["", "Sentiment", "abc4", " ", "-"])
    def test_malformed(self, field):
        with pytest.raises(MalformedRecordError):
            parse_code(field)

    def test_malformed_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_code("x")


def test_leading_and_second_field():
    assert leading_field("4, id1") == "4"
    assert leading_field("no delimiter") == "no delimiter"
    assert second_field("4, id1") == "id1"
    assert second_field("4") == ""


def test_only_c_locale_whitespace_separates_words():
    assert tokenize("a\xa0b") == ["ab"]
    assert tokenize("x\u2003y z") == ["xy", "z"]
    assert tokenize("a\vb\fc\rd") == ["a", "b", "c", "d"]
