#!/usr/bin/env python3.10
# -*- coding: utf-8 -*-

import logging
from dataclasses import dataclass

from bntx import (
    BNTX_HEADER,
    BNTX_MAGIC,
    BRTI_HEADER,
    BRTI_MAGIC,
    LITTLE_ENDIAN_BOM,
    MINIMUM_FILE_SIZE,
    NX_HEADER,
    NX_HEADER_OFFSET,
    NX_MAGIC,
)
from byte_reader import ByteReader
from errors import (
    BadDataPointerError,
    BadTextureMagicError,
    BadTexturePointerError,
    InvalidContainerError,
    InvalidTextureError,
    OutOfRangeError,
    TextureSizeMismatchError,
    TextureSkippedError,
    UnsupportedEndiannessError,
)
from formats import format_code, format_name

logger = logging.getLogger(__name__)

MAX_FILE_NAME_LENGTH = 256

# Blocks are at most 32 GOBs tall
MAX_BLOCK_HEIGHT_LOG2 = 5

# Largest 2D texture the Tegra X1 supports
MAX_TEXTURE_DIMENSION = 16384


@dataclass(frozen=True)
class TextureRecord:
    name: str
    width: int
    height: int
    raw_format: int
    tile_mode: int
    block_height_log2: int
    alignment: int
    image_size: int
    data: bytes

    def __post_init__(self):
        if self.width == 0 or self.height == 0:
            raise InvalidTextureError(
                f"Texture '{self.name}' has zero size {self.width}x{self.height}"
            )
        if max(self.width, self.height) > MAX_TEXTURE_DIMENSION:
            raise InvalidTextureError(
                f"Texture '{self.name}' is too large ({self.width}x{self.height})"
            )
        if len(self.data) != self.image_size:
            raise TextureSizeMismatchError(
                f"Texture '{self.name}' declares {self.image_size} bytes "
                f"but has {len(self.data)}"
            )
        if self.block_height_log2 > MAX_BLOCK_HEIGHT_LOG2:
            raise InvalidTextureError(
                f"Texture '{self.name}' has invalid block height "
                f"2^{self.block_height_log2}"
            )

    @property
    def format_code(self) -> int:
        return format_code(self.raw_format)

    @property
    def format_name(self) -> str:
        return format_name(self.raw_format)

    @property
    def is_linear(self) -> bool:
        return self.tile_mode == 0

    @property
    def block_height(self) -> int:
        return 1 << self.block_height_log2


class BNTX:
    def __init__(self, name: str, file_size: int, textures: list[TextureRecord]):
        self._name = name
        self._file_size = file_size
        self._textures = tuple(textures)

    @staticmethod
    def parse(buffer: bytes) -> "BNTX":
        reader = ByteReader(buffer)

        if len(reader) < MINIMUM_FILE_SIZE:
            raise InvalidContainerError(
                f"File too small ({len(reader)} bytes) to be a BNTX container"
            )

        header = reader.parse(BNTX_HEADER, 0)
        if header.magic != BNTX_MAGIC:
            raise InvalidContainerError("Not a BNTX file")
        if header.bom != LITTLE_ENDIAN_BOM:
            raise UnsupportedEndiannessError("Big endian BNTX files are not supported")

        name = _read_file_name(reader, header.file_name_offset)

        nx = reader.parse(NX_HEADER, NX_HEADER_OFFSET)
        if nx.magic != NX_MAGIC:
            raise InvalidContainerError("Invalid NX header")

        logger.info("File name: %s", name)
        logger.info("File size: %d", header.file_size)
        logger.info("Textures count: %d", nx.texture_count)

        texture_count = nx.texture_count
        readable = _readable_pointer_count(reader, nx.info_pointers_address)
        if texture_count > readable:
            logger.warning(
                "Texture count %d exceeds the %d pointers in the file",
                texture_count,
                readable,
            )
            texture_count = readable

        textures = []
        for index in range(texture_count):
            try:
                texture = _parse_texture(reader, nx.info_pointers_address, index)
            except TextureSkippedError as e:
                logger.warning("Skipping texture %d: %s", index, e)
                continue
            textures.append(texture)

        return BNTX(name, header.file_size, textures)

    @property
    def name(self) -> str:
        return self._name

    @property
    def file_size(self) -> int:
        return self._file_size

    @property
    def textures(self) -> tuple[TextureRecord, ...]:
        return self._textures


def _read_file_name(reader: ByteReader, offset: int) -> str:
    # Informational only, a bad offset is not worth failing over
    try:
        return reader.cstring(offset, MAX_FILE_NAME_LENGTH)
    except OutOfRangeError:
        logger.debug("File name offset 0x%X is outside the file", offset)
        return ""


def _readable_pointer_count(reader: ByteReader, info_pointers_address: int) -> int:
    if info_pointers_address < 0:
        return 0
    return max(0, (len(reader) - info_pointers_address) // 8)


def _parse_texture(
    reader: ByteReader, info_pointers_address: int, index: int
) -> TextureRecord:
    try:
        info_address = reader.s64(info_pointers_address + index * 8)
    except OutOfRangeError as e:
        raise BadTexturePointerError(f"Texture info pointer unreadable: {e}") from e

    if not reader.contains(info_address):
        raise BadTexturePointerError(
            f"Invalid texture info address 0x{info_address:X}"
        )

    try:
        return _parse_brti(reader, info_address)
    except OutOfRangeError as e:
        raise InvalidTextureError(f"Truncated texture record: {e}") from e


def _parse_brti(reader: ByteReader, address: int) -> TextureRecord:
    magic = reader.read_bytes(address, len(BRTI_MAGIC))
    if magic != BRTI_MAGIC:
        raise BadTextureMagicError(f"Invalid BRTI magic {magic!r}")

    info = reader.parse(BRTI_HEADER, address)
    name = reader.pascal_string(info.name_address)

    logger.info(
        "Texture '%s': %dx%d %s %s, block height 2^%d, image size %d",
        name,
        info.width,
        info.height,
        format_name(info.format),
        "LINEAR" if info.tile_mode == 0 else "BLOCK_LINEAR",
        info.size_range,
        info.image_size,
    )
    logger.debug(
        "Texture '%s': flags 0x%X, swizzle 0x%X, %d mips",
        name,
        info.flags,
        info.swizzle,
        info.mip_count,
    )

    # Only the base level is extracted, so only the first pointer matters
    data_address = reader.s64(info.pointers_address)
    if not reader.contains(data_address, info.image_size):
        raise BadDataPointerError(
            f"Invalid data address 0x{data_address:X} for '{name}'"
        )

    return TextureRecord(
        name=name,
        width=info.width,
        height=info.height,
        raw_format=info.format,
        tile_mode=info.tile_mode,
        block_height_log2=info.size_range,
        alignment=info.alignment,
        image_size=info.image_size,
        data=reader.read_bytes(data_address, info.image_size),
    )
