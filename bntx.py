#!/usr/bin/env python3.10
# -*- coding: utf-8 -*-

from construct import (
    Bytes,
    Int8ul,
    Int16ul,
    Int32ul,
    Int64sl,
    Padding,
    Struct,
)


BNTX_MAGIC = b"BNTX"
NX_MAGIC = b"NX  "
BRTI_MAGIC = b"BRTI"

LITTLE_ENDIAN_BOM = b"\xFF\xFE"

MINIMUM_FILE_SIZE = 0x100

NX_HEADER_OFFSET = 0x20

BNTX_HEADER = Struct(
    "magic" / Bytes(4),
    Padding(4),
    "version" / Int32ul,
    "bom" / Bytes(2),
    "alignment" / Int8ul,
    "target_address_size" / Int8ul,
    "file_name_offset" / Int32ul,
    "flags" / Int16ul,
    "block_offset" / Int16ul,
    "relocation_table_offset" / Int32ul,
    "file_size" / Int32ul,
)

NX_HEADER = Struct(
    "magic" / Bytes(4),
    "texture_count" / Int32ul,
    "info_pointers_address" / Int64sl,
    "data_block_address" / Int64sl,
    "dictionary_address" / Int64sl,
    "string_dictionary_length" / Int32ul,
)

# Only the fields needed to locate the base level are named
BRTI_HEADER = Struct(
    "magic" / Bytes(4),
    Padding(12),
    "tile_mode" / Int8ul,  # 0x10
    Padding(1),
    "flags" / Int16ul,  # 0x12
    "swizzle" / Int16ul,  # 0x14
    "mip_count" / Int16ul,  # 0x16
    Padding(4),
    "format" / Int32ul,  # 0x1C
    Padding(4),
    "width" / Int32ul,  # 0x24
    "height" / Int32ul,  # 0x28
    Padding(8),
    "size_range" / Int32ul,  # 0x34
    Padding(0x18),
    "image_size" / Int32ul,  # 0x50
    "alignment" / Int32ul,  # 0x54
    Padding(8),
    "name_address" / Int64sl,  # 0x60
    Padding(8),
    "pointers_address" / Int64sl,  # 0x70
)
