import json

import pytest
from prefixcodec.config import CodecConfig
from prefixcodec.errors import EmptyInput, InsufficientInput, InvalidCodeTable, UndecodableTail
from prefixcodec.session import (
    EncodeResult, check_codebook_mode, decode_bits, dump_codebook, encode_text, format_report,
    load_codebook,
)

TEXT = ("Shannon and Fano built codes from the top down, "
        "Huffman merged them from the bottom up. ") * 12


class TestEncodeText:

    @pytest.mark.parametrize("mode", ["sf", "hf"])
    def test_round_trip(self, mode):
        result = encode_text(TEXT, CodecConfig(mode=mode))
        assert result.mode == mode
        assert not result.digram
        assert decode_bits(result.bits, result) == TEXT

    def test_rejects_short_input(self):
        with pytest.raises(InsufficientInput) as exc:
            encode_text("a" * 999)
        assert exc.value.count == 999
        assert exc.value.minimum == 1000

    def test_minimum_counted_before_digrams(self):
        # 1000 characters but only 500 letters
        text = "a " * 500
        result = encode_text(text, CodecConfig(mode="ext2"))
        assert len(result.symbols) == 250

    def test_minimum_can_be_disabled(self):
        result = encode_text("zzzz", CodecConfig(min_symbols=0))
        assert result.code_table == {"z": "0"}
        assert result.bits == "0000"
        assert decode_bits("0000", result) == "zzzz"

    def test_empty_input_with_check_disabled(self):
        with pytest.raises(EmptyInput):
            encode_text("", CodecConfig(min_symbols=0))

    def test_example_huffman(self):
        result = encode_text("aaaabbbccd", CodecConfig(mode="hf", min_symbols=0))
        assert result.frequencies == {"a": 4, "b": 3, "c": 2, "d": 1}
        assert decode_bits(result.bits, result) == "aaaabbbccd"

    @pytest.mark.parametrize("builder", ["sf", "hf"])
    def test_digram_mode(self, builder):
        result = encode_text(TEXT, CodecConfig(mode="ext2", digram_builder=builder))
        assert result.digram
        assert all(len(s) == 2 and s.isalpha() for s in result.code_table)
        letters = "".join(ch for ch in TEXT if ch.isascii() and ch.isalpha())
        assert decode_bits(result.bits, result) == letters[: len(letters) // 2 * 2]

    def test_digram_statistics_per_character(self):
        result = encode_text(TEXT, CodecConfig(mode="ext2"))
        st = result.statistics()
        atomic = EncodeResult("hf", result.symbols, result.frequencies,
                              result.code_table, result.bits).statistics()
        assert st.entropy == pytest.approx(atomic.entropy / 2)
        assert st.avg_length == pytest.approx(atomic.avg_length / 2)

    def test_independent_calls(self):
        a = encode_text(TEXT, CodecConfig(mode="sf"))
        b = encode_text(TEXT.upper(), CodecConfig(mode="sf"))
        assert decode_bits(a.bits, a) == TEXT
        assert decode_bits(b.bits, b) == TEXT.upper()


class TestDecodeBits:

    def test_strips_stray_characters(self):
        codes = {"a": "0", "b": "10", "c": "11"}
        assert decode_bits(" 0 10\n11\r\n", codes) == "abc"

    def test_wrong_table(self):
        with pytest.raises(UndecodableTail):
            decode_bits("1", {"a": "0"})


class TestCodebookText:

    def test_dump_and_load(self):
        codes = {"é": "0", "ab": "10", " ": "11"}
        text = dump_codebook(codes)
        assert json.loads(text) == codes
        assert load_codebook(text) == codes
        assert list(load_codebook(text)) == list(codes)

    @pytest.mark.parametrize("text", ['["0", "1"]', '{"a": 1}', "{not json", ""])
    def test_load_rejects_bad_tables(self, text):
        with pytest.raises(InvalidCodeTable):
            load_codebook(text)


class TestReport:

    def test_labeled_lines(self):
        result = encode_text("aaaabbbccd", CodecConfig(mode="hf", min_symbols=0))
        lines = format_report(result).splitlines()
        assert lines[0] == "Mode: hf"
        assert lines[1] == "Symbols: 10"
        assert lines[2] == "Distinct symbols: 4"
        assert lines[3].startswith("Entropy (H): 1.8464")
        assert lines[4] == "Average length (L): 1.9000 bits/symbol"
        assert lines[5].startswith("Efficiency (E): 97.18%")
        assert "Codebook:" in lines
        assert "Code Length" in lines[lines.index("Codebook:") + 1]

    def test_digram_unit(self):
        result = encode_text(TEXT, CodecConfig(mode="ext2"))
        assert "bits/character" in format_report(result)


class TestCodebookMode:

    def test_ext2_accepts_letter_pairs(self):
        check_codebook_mode({"th": "0", "He": "1"}, "ext2")

    @pytest.mark.parametrize("sym", ["t", "the", "t ", "1a"])
    def test_ext2_rejects_other_symbols(self, sym):
        with pytest.raises(InvalidCodeTable):
            check_codebook_mode({"th": "0", sym: "1"}, "ext2")

    @pytest.mark.parametrize("mode", ["sf", "hf"])
    def test_other_modes_accept_anything(self, mode):
        check_codebook_mode({"a": "0", "ab": "1"}, mode)
