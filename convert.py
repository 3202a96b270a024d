#!/usr/bin/env python3.10
# -*- coding: utf-8 -*-

import logging
from typing import NamedTuple, Optional

from bntx_parse import BNTX, TextureRecord
from dds import build_dds_header
from errors import NoTexturesFoundError, UnsupportedFormatError
from formats import lookup_format
from swizzle import deswizzle, expected_size

logger = logging.getLogger(__name__)


class DDSImage(NamedTuple):
    name: str
    header: bytes
    payload: bytes


def convert(buffer: bytes) -> list[DDSImage]:
    bntx = BNTX.parse(buffer)

    if not bntx.textures:
        raise NoTexturesFoundError("No textures found in file")

    images = []
    for texture in bntx.textures:
        image = convert_texture(texture)
        if image is not None:
            images.append(image)

    return images


def convert_texture(texture: TextureRecord) -> Optional[DDSImage]:
    try:
        descriptor = lookup_format(texture.raw_format)
    except UnsupportedFormatError as e:
        logger.warning("Skipping %s: %s", texture.name, e)
        return None

    if descriptor.fourcc is None:
        logger.warning(
            "%s: no DDS FourCC for %s, writing a zeroed pixel format",
            texture.name,
            descriptor.name,
        )

    size = expected_size(texture, descriptor)
    payload = deswizzle(texture, descriptor)[:size]
    header = build_dds_header(texture.width, texture.height, descriptor.code, size)

    logger.info("Processed %s (%s)", texture.name, descriptor.name)

    return DDSImage(texture.name, header, payload)
