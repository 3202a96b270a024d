#!/usr/bin/env python3.10
# -*- coding: utf-8 -*-

from construct import Construct, Int8ul, Int16ul, Int32ul, Int64sl, Int64ul

from errors import OutOfRangeError


class ByteReader:
    # Every read is range checked against the whole buffer

    def __init__(self, buffer: bytes):
        self._buffer = bytes(buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def contains(self, offset: int, size: int = 1) -> bool:
        return offset >= 0 and size >= 0 and offset + size <= len(self._buffer)

    def check(self, offset: int, size: int):
        if not self.contains(offset, size):
            raise OutOfRangeError(offset, size, len(self._buffer))

    def read_bytes(self, offset: int, size: int) -> bytes:
        self.check(offset, size)
        return self._buffer[offset : offset + size]

    def parse(self, struct: Construct, offset: int):
        size = struct.sizeof()
        return struct.parse(self.read_bytes(offset, size))

    def u8(self, offset: int) -> int:
        return self.parse(Int8ul, offset)

    def u16(self, offset: int) -> int:
        return self.parse(Int16ul, offset)

    def u32(self, offset: int) -> int:
        return self.parse(Int32ul, offset)

    def u64(self, offset: int) -> int:
        return self.parse(Int64ul, offset)

    def s64(self, offset: int) -> int:
        return self.parse(Int64sl, offset)

    def cstring(self, offset: int, max_length: int) -> str:
        # Stops at a NUL, at max_length or at the end of the buffer
        self.check(offset, 0 if max_length == 0 else 1)
        end = min(offset + max_length, len(self._buffer))
        raw = self._buffer[offset:end].split(b"\x00", 1)[0]
        return raw.decode("utf-8", errors="replace")

    def pascal_string(self, offset: int) -> str:
        length = self.u16(offset)
        return self.cstring(offset + 2, length)
