#!/usr/bin/env python3.10
# -*- coding: utf-8 -*-

from bntx_parse import TextureRecord
from formats import FormatDescriptor

GOB_WIDTH = 64
GOB_HEIGHT = 8
GOB_SIZE = GOB_WIDTH * GOB_HEIGHT

LINEAR_PITCH_ALIGNMENT = 32


def div_round_up(n: int, d: int) -> int:
    return (n + d - 1) // d


def round_up(x: int, y: int) -> int:
    # y must be a power of two
    return ((x - 1) | (y - 1)) + 1


def get_addr_block_linear(
    x: int,
    y: int,
    image_width: int,
    bytes_per_pixel: int,
    base_address: int,
    block_height: int,
) -> int:
    # image_width is in elements (texels or compressed blocks), block_height in
    # GOBs. A GOB is 64 bytes by 8 rows.
    image_width_in_gobs = div_round_up(image_width * bytes_per_pixel, GOB_WIDTH)

    gob_address = (
        base_address
        + (y // (GOB_HEIGHT * block_height)) * GOB_SIZE * block_height * image_width_in_gobs
        + (x * bytes_per_pixel // GOB_WIDTH) * GOB_SIZE * block_height
        + (y % (GOB_HEIGHT * block_height) // GOB_HEIGHT) * GOB_SIZE
    )

    x *= bytes_per_pixel

    return (
        gob_address
        + ((x % 64) // 32) * 256
        + ((y % 8) // 2) * 64
        + ((x % 32) // 16) * 32
        + (y % 2) * 16
        + (x % 16)
    )


def grid_size(texture: TextureRecord, descriptor: FormatDescriptor) -> tuple[int, int]:
    return (
        div_round_up(texture.width, descriptor.block_width),
        div_round_up(texture.height, descriptor.block_height),
    )


def expected_size(texture: TextureRecord, descriptor: FormatDescriptor) -> int:
    width, height = grid_size(texture, descriptor)
    return width * height * descriptor.bytes_per_block


def surface_layout(
    texture: TextureRecord, descriptor: FormatDescriptor
) -> tuple[int, int]:
    width, height = grid_size(texture, descriptor)
    bpp = descriptor.bytes_per_block
    alignment = max(texture.alignment, 1)

    if texture.is_linear:
        pitch = round_up(width * bpp, LINEAR_PITCH_ALIGNMENT)
        surface_size = round_up(pitch * height, alignment)
    else:
        pitch = round_up(width * bpp, GOB_WIDTH)
        surface_size = round_up(
            pitch * round_up(height, texture.block_height * GOB_HEIGHT), alignment
        )

    return pitch, surface_size


def deswizzle(texture: TextureRecord, descriptor: FormatDescriptor) -> bytes:
    """
    Convert the base level to linear order. The result is surface_size bytes,
    elements that fall outside either buffer are left as zeros.
    """
    width, height = grid_size(texture, descriptor)
    bpp = descriptor.bytes_per_block
    pitch, surface_size = surface_layout(texture, descriptor)
    block_height = texture.block_height

    data = texture.data
    source_limit = min(surface_size, len(data))

    result = bytearray(surface_size)

    for y in range(height):
        for x in range(width):
            if texture.is_linear:
                source = y * pitch + x * bpp
            else:
                source = get_addr_block_linear(x, y, width, bpp, 0, block_height)

            destination = (y * width + x) * bpp

            if source + bpp <= source_limit and destination + bpp <= len(data):
                result[destination : destination + bpp] = data[source : source + bpp]

    return bytes(result)
