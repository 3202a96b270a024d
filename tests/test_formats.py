import pytest

from errors import UnsupportedFormatError
from formats import FORMATS, format_code, format_name, lookup_format


class TestFormatTable:
    def test_descriptor_invariants(self):
        for code, descriptor in FORMATS.items():
            assert descriptor.code == code
            assert descriptor.bytes_per_block >= 1
            assert descriptor.block_width >= 1
            assert descriptor.block_height >= 1

    def test_fourcc_codes_are_four_characters(self):
        for descriptor in FORMATS.values():
            if descriptor.fourcc is not None:
                assert len(descriptor.fourcc) == 4

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            FORMATS[0x99] = FORMATS[0x1A]

    def test_uncompressed_formats(self):
        descriptor = FORMATS[0x0B]
        assert descriptor.name == "R8_G8_B8_A8"
        assert descriptor.bytes_per_block == 4
        assert descriptor.fourcc is None

    def test_astc_block_dimensions(self):
        descriptor = FORMATS[0x39]
        assert descriptor.name == "ASTC12x10"
        assert (descriptor.block_width, descriptor.block_height) == (12, 10)
        assert descriptor.bytes_per_block == 16
        assert descriptor.fourcc is None


class TestLookup:
    def test_format_code_drops_component_type(self):
        assert format_code(0x1C06) == 0x1C

    def test_lookup_bc3(self):
        descriptor = lookup_format(0x1C01)
        assert descriptor.name == "BC3"
        assert descriptor.bytes_per_block == 16
        assert (descriptor.block_width, descriptor.block_height) == (4, 4)
        assert descriptor.fourcc == "DXT5"

    def test_lookup_unknown(self):
        with pytest.raises(UnsupportedFormatError):
            lookup_format(0x7701)

    def test_format_name(self):
        assert format_name(0x2001) == "BC7"

    def test_format_name_unknown_is_hex(self):
        assert format_name(0x7701) == "0x7701"
