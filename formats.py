#!/usr/bin/env python3.10
# -*- coding: utf-8 -*-

from types import MappingProxyType
from typing import NamedTuple, Optional

from errors import UnsupportedFormatError


class FormatDescriptor(NamedTuple):
    code: int
    name: str
    bytes_per_block: int
    block_width: int = 1
    block_height: int = 1
    fourcc: Optional[str] = None


_DESCRIPTORS = (
    # Uncompressed
    FormatDescriptor(0x02, "R8_UNORM", 1),
    FormatDescriptor(0x07, "R5_G6_B5", 2),
    FormatDescriptor(0x09, "R8_G8", 2),
    FormatDescriptor(0x0B, "R8_G8_B8_A8", 4),
    # BCn
    FormatDescriptor(0x1A, "BC1", 8, 4, 4, "DXT1"),
    FormatDescriptor(0x1B, "BC2", 16, 4, 4, "DXT3"),
    FormatDescriptor(0x1C, "BC3", 16, 4, 4, "DXT5"),
    FormatDescriptor(0x1D, "BC4", 8, 4, 4, "ATI1"),
    FormatDescriptor(0x1E, "BC5", 16, 4, 4, "ATI2"),
    FormatDescriptor(0x1F, "BC6H", 16, 4, 4, "BC6H"),
    FormatDescriptor(0x20, "BC7", 16, 4, 4, "BC7 "),
    # ASTC
    FormatDescriptor(0x2D, "ASTC4x4", 16, 4, 4),
    FormatDescriptor(0x2E, "ASTC5x4", 16, 5, 4),
    FormatDescriptor(0x2F, "ASTC5x5", 16, 5, 5),
    FormatDescriptor(0x30, "ASTC6x5", 16, 6, 5),
    FormatDescriptor(0x31, "ASTC6x6", 16, 6, 6),
    FormatDescriptor(0x32, "ASTC8x5", 16, 8, 5),
    FormatDescriptor(0x33, "ASTC8x6", 16, 8, 6),
    FormatDescriptor(0x34, "ASTC8x8", 16, 8, 8),
    FormatDescriptor(0x35, "ASTC10x5", 16, 10, 5),
    FormatDescriptor(0x36, "ASTC10x6", 16, 10, 6),
    FormatDescriptor(0x37, "ASTC10x8", 16, 10, 8),
    FormatDescriptor(0x38, "ASTC10x10", 16, 10, 10),
    FormatDescriptor(0x39, "ASTC12x10", 16, 12, 10),
    FormatDescriptor(0x3A, "ASTC12x12", 16, 12, 12),
)

FORMATS = MappingProxyType({descriptor.code: descriptor for descriptor in _DESCRIPTORS})


def format_code(raw_format: int) -> int:
    # The low byte is the component type (UNORM, SRGB, ...)
    return raw_format >> 8


def lookup_format(raw_format: int) -> FormatDescriptor:
    try:
        return FORMATS[format_code(raw_format)]
    except KeyError:
        raise UnsupportedFormatError(
            f"Unsupported texture format 0x{raw_format:X}"
        ) from None


def format_name(raw_format: int) -> str:
    descriptor = FORMATS.get(format_code(raw_format))
    if descriptor is None:
        return f"0x{raw_format:X}"
    return descriptor.name
