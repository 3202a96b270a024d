#!/usr/bin/env python3.10
# -*- coding: utf-8 -*-

from construct import Const, Int32ul, PaddedString, Struct, Padding

from formats import FORMATS


DDSD_CAPS = 0x1
DDSD_HEIGHT = 0x2
DDSD_WIDTH = 0x4
DDSD_PIXELFORMAT = 0x1000
DDSD_LINEARSIZE = 0x80000

DDPF_FOURCC = 0x4

DDSCAPS_TEXTURE = 0x1000

DDS_PIXELFORMAT = Struct(
    Const(32, Int32ul),
    "dwFlags" / Int32ul,
    "dwFourCC" / PaddedString(4, "ASCII"),
    "dwRGBBitCount" / Int32ul,
    "dwRBitMask" / Int32ul,
    "dwGBitMask" / Int32ul,
    "dwBBitMask" / Int32ul,
    "dwABitMask" / Int32ul,
)

DDS_HEADER = Struct(
    Const(124, Int32ul),
    "dwFlags" / Int32ul,
    "dwHeight" / Int32ul,
    "dwWidth" / Int32ul,
    "dwPitchOrLinearSize" / Int32ul,
    "dwDepth" / Int32ul,
    "dwMipMapCount" / Int32ul,
    Padding(11 * 4),
    "ddspf" / DDS_PIXELFORMAT,
    "dwCaps" / Int32ul,
    "dwCaps2" / Int32ul,
    "dwCaps3" / Int32ul,
    "dwCaps4" / Int32ul,
    Padding(4),
)

DDS_FILE_HEADER = Struct(
    Const(b"DDS "),
    "header" / DDS_HEADER,
)

DDS_FILE_HEADER_SIZE = DDS_FILE_HEADER.sizeof()


def build_dds_header(
    width: int, height: int, format_code: int, linear_size: int
) -> bytes:
    # Formats without a FourCC (uncompressed, ASTC) get a zeroed one
    descriptor = FORMATS.get(format_code)
    fourcc = descriptor.fourcc if descriptor else None

    return DDS_FILE_HEADER.build(
        dict(
            header=dict(
                dwFlags=DDSD_CAPS
                | DDSD_HEIGHT
                | DDSD_WIDTH
                | DDSD_PIXELFORMAT
                | DDSD_LINEARSIZE,
                dwHeight=height,
                dwWidth=width,
                dwPitchOrLinearSize=linear_size,
                dwDepth=0,
                dwMipMapCount=1,
                ddspf=dict(
                    dwFlags=DDPF_FOURCC,
                    dwFourCC=fourcc or "",
                    dwRGBBitCount=0,
                    dwRBitMask=0,
                    dwGBitMask=0,
                    dwBBitMask=0,
                    dwABitMask=0,
                ),
                dwCaps=DDSCAPS_TEXTURE,
                dwCaps2=0,
                dwCaps3=0,
                dwCaps4=0,
            )
        )
    )
