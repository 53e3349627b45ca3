"""
Mac OS Roman decoding.
"""

from ndattool.macroman import HIGH_CHARS, decode_mac_roman


class TestMacRoman:

    def test_table_covers_high_half(self):
        assert len(HIGH_CHARS) == 128

    def test_table_matches_codec(self):
        high = bytes(range(0x80, 0x100))
        assert HIGH_CHARS == high.decode("mac_roman")

    def test_ascii_passthrough(self):
        low = bytes(range(0x80))
        assert decode_mac_roman(low) == low.decode("ascii")

    def test_resource_type(self):
        text = decode_mac_roman(bytes([99, 104, 138, 114]))
        assert text == "chär"
        assert text[2] == HIGH_CHARS[0x0A]

    def test_one_char_per_byte(self):
        data = bytes(range(256))
        assert len(decode_mac_roman(data)) == 256

    def test_bookkeeping_tags(self):
        assert decode_mac_roman(b"cs\x9fm") == "csüm"
        assert decode_mac_roman(b"ds\x95g") == "dsïg"

    def test_empty(self):
        assert decode_mac_roman(b"") == ""
