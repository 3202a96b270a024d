#!/usr/bin/env python3.10
# -*- coding: utf-8 -*-


class BNTXError(Exception):
    pass


class ContainerError(BNTXError):
    pass


class InvalidContainerError(ContainerError):
    pass


class UnsupportedEndiannessError(ContainerError):
    pass


class OutOfRangeError(BNTXError):
    def __init__(self, offset: int, size: int, length: int):
        super().__init__(
            f"Read of {size} bytes at 0x{offset:X} is outside the buffer "
            f"(length 0x{length:X})"
        )
        self.offset = offset
        self.size = size
        self.length = length


class NoTexturesFoundError(BNTXError):
    pass


class TextureSkippedError(BNTXError):
    """A single texture can't be converted. Other textures are unaffected."""


class BadTexturePointerError(TextureSkippedError):
    pass


class BadTextureMagicError(TextureSkippedError):
    pass


class BadDataPointerError(TextureSkippedError):
    pass


class InvalidTextureError(TextureSkippedError):
    pass


class TextureSizeMismatchError(InvalidTextureError):
    pass


class UnsupportedFormatError(TextureSkippedError):
    pass
