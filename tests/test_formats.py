"""
Tests for scalardist.formats — decoding text into scalar sequences.

    §1  str input
    §2  bytes-like input
    §3  Normalization
    §4  Malformed input
    §5  Back to text / bytes
    §6  ScalarSequence behaviour
"""

import sys
import os
import logging
import dataclasses

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from scalardist.core import ScalarSequence
from scalardist.errors import DecodeError, InvalidInputError
from scalardist.formats import from_scalars, to_bytes, to_scalars


# ═══════════════════════════════════════════════════════════════════
#  §1  STR INPUT
# ═══════════════════════════════════════════════════════════════════

class TestStrInput:

    def test_ascii(self):
        assert to_scalars("abc").values == (0x61, 0x62, 0x63)

    def test_one_element_per_code_point(self):
        seq = to_scalars("a\U0001f41d\u00e9\u6771")
        assert len(seq) == 4
        assert seq.values == (0x61, 0x1F41D, 0xE9, 0x6771)

    def test_empty(self):
        assert len(to_scalars("")) == 0

    def test_passthrough(self):
        seq = to_scalars("abc")
        assert to_scalars(seq) is seq


# ═══════════════════════════════════════════════════════════════════
#  §2  BYTES-LIKE INPUT
# ═══════════════════════════════════════════════════════════════════

class TestBytesInput:

    def test_utf8_width_is_irrelevant(self):
        data = "🐝🔨".encode("utf-8")
        assert len(data) == 8
        assert len(to_scalars(data)) == 2

    @pytest.mark.parametrize("kind", [bytes, bytearray, memoryview])
    def test_bytes_like_types(self, kind):
        data = kind("naïve".encode("utf-8"))
        assert to_scalars(data) == to_scalars("naïve")

    @pytest.mark.parametrize("encoding", ["utf-8", "utf-16", "utf-32", "utf-16-be"])
    def test_unicode_encodings(self, encoding):
        text = "🐝 and 東京"
        assert to_scalars(text.encode(encoding), encoding) == to_scalars(text)

    def test_legacy_encoding(self):
        assert to_scalars(b"caf\xe9", "latin-1") == to_scalars("caf\u00e9")


# ═══════════════════════════════════════════════════════════════════
#  §3  NORMALIZATION
# ═══════════════════════════════════════════════════════════════════

class TestNormalization:

    def test_default_keeps_decomposed(self):
        assert len(to_scalars("e\u0301")) == 2

    def test_nfc_composes(self):
        assert to_scalars("e\u0301", normalize="NFC").values == (0xE9,)

    def test_nfd_decomposes(self):
        assert to_scalars("e\u0301", normalize="NFD").values == (0x65, 0x301)

    def test_normalizes_scalar_sequence_input(self):
        seq = to_scalars("e\u0301")
        assert to_scalars(seq, normalize="NFC").values == (0xE9,)

    def test_normalizes_after_decoding(self):
        data = "e\u0301".encode("utf-8")
        assert to_scalars(data, normalize="NFC").values == (0xE9,)

    def test_unknown_form(self):
        with pytest.raises(InvalidInputError):
            to_scalars("abc", normalize="NFX")


# ═══════════════════════════════════════════════════════════════════
#  §4  MALFORMED INPUT
# ═══════════════════════════════════════════════════════════════════

class TestMalformedInput:

    @pytest.mark.parametrize("data,position", [
        (b"\xff", 0),
        (b"ab\xc3", 2),          # truncated two-byte sequence
        (b"a\xc3\x28", 1),       # bad continuation byte
        (b"\xed\xa0\x80", 0),    # UTF-8 encoded surrogate
        (b"\xc0\xaf", 0),        # overlong "/"
        (b"\xf4\x90\x80\x80", 0),  # above U+10FFFF
    ])
    def test_invalid_utf8(self, data, position):
        with pytest.raises(DecodeError) as excinfo:
            to_scalars(data)
        assert excinfo.value.encoding == "utf-8"
        assert excinfo.value.position == position
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    def test_lone_surrogate_in_str(self):
        with pytest.raises(DecodeError) as excinfo:
            to_scalars("ab\udc80")
        assert excinfo.value.position == 2
        assert "U+DC80" in str(excinfo.value)

    def test_surrogate_pair_code_units_in_str(self):
        # A str made of two UTF-16 code units is not the scalar they encode.
        with pytest.raises(DecodeError):
            to_scalars("\ud83d\udc1d")

    def test_unknown_encoding(self):
        with pytest.raises(DecodeError) as excinfo:
            to_scalars(b"abc", "no-such-codec")
        assert excinfo.value.encoding == "no-such-codec"

    def test_non_str_encoding(self):
        with pytest.raises(InvalidInputError):
            to_scalars(b"abc", None)

    def test_none(self):
        with pytest.raises(InvalidInputError):
            to_scalars(None)

    @pytest.mark.parametrize("value", [42, 3.5, ["a"], object()])
    def test_unsupported_types(self, value):
        with pytest.raises(InvalidInputError):
            to_scalars(value)

    def test_decode_failure_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="scalardist"):
            with pytest.raises(DecodeError):
                to_scalars(b"\xff")
        assert "malformed utf-8 input at byte 0" in caplog.text


# ═══════════════════════════════════════════════════════════════════
#  §5  BACK TO TEXT / BYTES
# ═══════════════════════════════════════════════════════════════════

class TestEncodeBack:

    def test_from_scalars(self):
        assert from_scalars(to_scalars("🐝🔨")) == "🐝🔨"

    def test_from_int_list(self):
        assert from_scalars([0x68, 0x69]) == "hi"

    def test_from_out_of_range(self):
        with pytest.raises(DecodeError):
            from_scalars([0x110000])

    def test_from_surrogate(self):
        with pytest.raises(DecodeError):
            from_scalars([0x61, 0xD800])

    def test_from_non_int(self):
        with pytest.raises(InvalidInputError):
            from_scalars(["a"])

    def test_from_none(self):
        with pytest.raises(InvalidInputError):
            from_scalars(None)

    def test_to_bytes(self):
        assert to_bytes(to_scalars("🐝")) == "🐝".encode("utf-8")
        assert to_bytes(to_scalars("caf\u00e9"), "latin-1") == b"caf\xe9"

    def test_to_bytes_unencodable(self):
        with pytest.raises(DecodeError) as excinfo:
            to_bytes(to_scalars("ab\u00e9"), "ascii")
        assert excinfo.value.position == 2

    def test_to_bytes_unknown_encoding(self):
        with pytest.raises(DecodeError) as excinfo:
            to_bytes(to_scalars("abc"), "no-such-codec")
        assert excinfo.value.encoding == "no-such-codec"
        assert isinstance(excinfo.value.__cause__, LookupError)


# ═══════════════════════════════════════════════════════════════════
#  §6  SCALAR SEQUENCE
# ═══════════════════════════════════════════════════════════════════

class TestScalarSequence:

    def test_str(self):
        assert str(to_scalars("東京")) == "東京"

    def test_indexing_and_iteration(self):
        seq = to_scalars("abc")
        assert seq[0] == 0x61
        assert seq[-1] == 0x63
        assert list(seq) == [0x61, 0x62, 0x63]
        assert seq[1:] == (0x62, 0x63)

    def test_equality_and_hash(self):
        assert to_scalars("abc") == to_scalars(b"abc")
        assert hash(to_scalars("abc")) == hash(to_scalars(b"abc"))

    def test_immutable(self):
        seq = to_scalars("abc")
        with pytest.raises(dataclasses.FrozenInstanceError):
            seq.values = (0x78,)

    def test_repr(self):
        assert repr(to_scalars("hi")) == "ScalarSequence('hi')"
        assert "len=20" in repr(ScalarSequence(tuple(range(0x61, 0x61 + 20))))

    def test_list_is_frozen_into_tuple(self):
        values = [0x61]
        seq = ScalarSequence(values)
        values.append(0x62)
        assert seq.values == (0x61,)
        assert len(seq) == 1
        assert hash(seq) == hash(ScalarSequence((0x61,)))

    @pytest.mark.parametrize("value,position", [
        ([0xD800], 0),
        ([0x61, 0xDFFF], 1),
        ([0x110000], 0),
        ([0x61, 0x62, -1], 2),
    ])
    def test_rejects_non_scalars(self, value, position):
        with pytest.raises(DecodeError) as excinfo:
            ScalarSequence(value)
        assert excinfo.value.position == position

    @pytest.mark.parametrize("value", [["a"], [1.0], [True], None, 5, "abc"])
    def test_rejects_non_ints(self, value):
        with pytest.raises(InvalidInputError):
            ScalarSequence(value)

    def test_boundary_scalars_accepted(self):
        seq = ScalarSequence((0, 0xD7FF, 0xE000, 0x10FFFF))
        assert len(seq) == 4


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
