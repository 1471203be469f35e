"""Tests for magicsig.signature."""

import dataclasses

import pytest

from magicsig.errors import InvalidArgumentError
from magicsig.signature import (
    FileSignature,
    check_signature,
    merge_bytes,
    merge_signature,
    normalize_extensions,
    split_signature,
)


class TestSplitSignature:
    def test_mixed_delimiters(self):
        text = "  AA  bb\t, \t, \tCc - dD ; \tEE ; ;; FF;"
        assert split_signature(text) == ["AA", "BB", "CC", "DD", "EE", "FF"]

    @pytest.mark.parametrize("text", [None, "", "   ", "\t"])
    def test_blank(self, text):
        assert split_signature(text) == []

    def test_wildcards_uppercased(self):
        assert split_signature("ff d8 ?? ?a") == ["FF", "D8", "??", "?A"]

    def test_keeps_invalid_tokens(self):
        assert split_signature("ABC 1") == ["ABC", "1"]


class TestCheckSignature:
    def test_valid(self):
        assert check_signature(["00", "FF", "?1", "a?", "??"])

    @pytest.mark.parametrize("tokens", [None, [], ["A"], ["ABC"], ["GG"], ["0X"], ["*1"]])
    def test_invalid(self, tokens):
        assert not check_signature(tokens)

    def test_one_bad_token_fails_all(self):
        assert not check_signature(["AA", "BB", "ZZ"])


class TestMergeSignature:
    def test_round_trip(self):
        text = "  AA  bb\t, \t, \tCc - dD ; \tEE ; ;; FF;"
        tokens = split_signature(text)
        assert check_signature(tokens)
        assert merge_signature(tokens) == "AA BB CC DD EE FF"

    def test_limit(self):
        assert merge_signature(["aa", "bb", "cc"], limit=2) == "AA BB"

    def test_limit_zero_joins_all(self):
        assert merge_signature(["aa", "bb"], limit=0) == "AA BB"

    @pytest.mark.parametrize("tokens", [None, []])
    def test_empty(self, tokens):
        assert merge_signature(tokens) == ""

    def test_bytes(self):
        assert merge_bytes(b"\x00\x0a\xff") == "00 0A FF"

    def test_bytes_limit(self):
        assert merge_bytes(b"\x01\x02\x03", limit=1) == "01"

    @pytest.mark.parametrize("data", [None, b""])
    def test_bytes_empty(self, data):
        assert merge_bytes(data) == ""


class TestNormalizeExtensions:
    def test_normalized(self):
        assert normalize_extensions(" .ext, .eXT ,  ext ") == ".ext,.eXT,.ext"

    def test_multiple_leading_dots(self):
        assert normalize_extensions("..tar.gz") == ".tar.gz"

    def test_blank_entries_dropped(self):
        assert normalize_extensions("png,, ,jpg") == ".png,.jpg"

    def test_list_input(self):
        assert normalize_extensions(["tif", ".tiff"]) == ".tif,.tiff"

    @pytest.mark.parametrize("value", [7, b"png", ["png", 3]])
    def test_invalid_type(self, value):
        with pytest.raises(InvalidArgumentError):
            normalize_extensions(value)

    @pytest.mark.parametrize("value", [None, "", "  ", " , "])
    def test_empty(self, value):
        assert normalize_extensions(value) == ""


class TestFileSignature:
    def test_default_state(self):
        sig = FileSignature()
        assert sig.name == ""
        assert sig.remarks == ""
        assert sig.extensions == ""
        assert sig.offset == 0
        assert sig.signature == ""
        assert sig.digits == ()
        assert sig.length == 0

    def test_canonical_signature(self):
        sig = FileSignature(signature="ff-d8;ff,e1 ?? ??")
        assert sig.signature == "FF D8 FF E1 ?? ??"
        assert sig.digits == ("FF", "D8", "FF", "E1", "??", "??")
        assert sig.length == 6

    def test_extensions_normalized(self):
        sig = FileSignature(extensions=" .ext, .eXT ,  ext ")
        assert sig.extensions == ".ext,.eXT,.ext"
        assert sig.extension_list == (".ext", ".eXT", ".ext")

    def test_blank_name_and_remarks(self):
        sig = FileSignature(name="   ", remarks=None)
        assert sig.name == ""
        assert sig.remarks == ""

    def test_negative_offset(self):
        with pytest.raises(InvalidArgumentError):
            FileSignature(offset=-1)

    def test_negative_offset_is_value_error(self):
        with pytest.raises(ValueError):
            FileSignature(offset=-1)

    def test_zero_offset(self):
        assert FileSignature(offset=0).offset == 0

    def test_large_offset(self):
        assert FileSignature(offset=2**40).offset == 2**40

    def test_non_integer_offset(self):
        with pytest.raises(InvalidArgumentError):
            FileSignature(offset="12")

    @pytest.mark.parametrize("value", [0, 12, 4.5, b"4D 5A", ["4D", "5A"]])
    def test_non_string_signature(self, value):
        with pytest.raises(InvalidArgumentError):
            FileSignature(signature=value)

    def test_none_signature_is_default(self):
        assert FileSignature(signature=None).length == 0

    @pytest.mark.parametrize("text", ["   ", "ABC", "GG", "A B", "4D 5A X"])
    def test_invalid_signature(self, text):
        with pytest.raises(InvalidArgumentError):
            FileSignature(signature=text)

    def test_immutable(self):
        sig = FileSignature(signature="4D 5A")
        with pytest.raises(dataclasses.FrozenInstanceError):
            sig.offset = 5

    def test_equality(self):
        assert FileSignature(signature="4d-5a") == FileSignature(signature="4D 5A")

    def test_from_dict(self):
        sig = FileSignature.from_dict({
            "name": "TAR",
            "remarks": "tar archive",
            "extensions": ["tar"],
            "offset": 257,
            "signature": "75 73 74 61 72 00 30 30",
        })
        assert sig.name == "TAR"
        assert sig.extensions == ".tar"
        assert sig.offset == 257
        assert sig.length == 8

    def test_str_truncates(self):
        sig = FileSignature(signature=" ".join(["AA"] * 12))
        text = str(sig)
        assert "Length=12" in text
        assert text.endswith('..."')
