import logging
import struct

import pytest

from bntx_builder import TextureSpec, build_bntx
from convert import DDSImage, convert
from errors import InvalidContainerError, NoTexturesFoundError


def _data(size):
    return bytes(index % 256 for index in range(size))


class TestConvert:
    def test_linear_bc1(self):
        data = _data(64)
        # 16x8 texels, 4x2 blocks, 32 byte pitch with no padding
        buffer = build_bntx(
            [TextureSpec(name="icon", width=16, height=8, raw_format=0x1A01, data=data)]
        )

        (image,) = convert(buffer)

        assert isinstance(image, DDSImage)
        assert image.name == "icon"
        assert image.header[84:88] == b"DXT1"
        assert struct.unpack_from("<III", image.header, 12) == (8, 16, 64)
        assert image.payload == data

    def test_payload_truncated_to_expected_size(self):
        # 4x4 RGBA in a linear surface padded to 512 bytes
        buffer = build_bntx(
            [
                TextureSpec(
                    width=4,
                    height=4,
                    raw_format=0x0B01,
                    alignment=512,
                    data=_data(512),
                )
            ]
        )

        (image,) = convert(buffer)

        assert len(image.payload) == 64
        assert struct.unpack_from("<I", image.header, 20)[0] == 64

    def test_block_linear_bc3(self):
        # 16x16 BC3 is 4x4 blocks, 64 bytes wide: one GOB per 8 block rows
        data = _data(512)
        buffer = build_bntx(
            [
                TextureSpec(
                    width=16,
                    height=16,
                    raw_format=0x1C01,
                    tile_mode=1,
                    alignment=512,
                    data=data,
                )
            ]
        )

        (image,) = convert(buffer)

        assert len(image.payload) == 256
        # Even block rows fill the even 16 byte sectors of each GOB half
        assert image.payload[0:16] == data[0:16]
        assert image.payload[16:32] == data[32:48]
        assert image.payload[32:48] == data[256:272]
        assert image.payload[48:64] == data[288:304]
        assert image.payload[64:80] == data[16:32]

    def test_unknown_format_is_skipped(self, caplog):
        buffer = build_bntx(
            [
                TextureSpec(name="odd", raw_format=0x7701, data=_data(256)),
                TextureSpec(name="good", data=_data(256)),
            ]
        )

        with caplog.at_level(logging.WARNING):
            images = convert(buffer)

        assert [image.name for image in images] == ["good"]
        assert "odd" in caplog.text

    def test_oversized_texture_is_skipped(self):
        buffer = build_bntx(
            [
                TextureSpec(
                    name="huge", width=0xFFFFFFFF, height=0xFFFFFFFF, data=_data(256)
                ),
                TextureSpec(name="good", data=_data(256)),
            ]
        )

        assert [image.name for image in convert(buffer)] == ["good"]

    def test_format_without_fourcc(self, caplog):
        buffer = build_bntx([TextureSpec(name="astc", raw_format=0x2D01, data=_data(256))])

        with caplog.at_level(logging.WARNING):
            (image,) = convert(buffer)

        assert image.header[84:88] == bytes(4)
        assert len(image.payload) == 256
        assert "ASTC4x4" in caplog.text

    def test_no_textures(self):
        with pytest.raises(NoTexturesFoundError):
            convert(build_bntx([]))

    def test_all_textures_invalid(self):
        buffer = build_bntx([TextureSpec(data=_data(16), data_address=-1)])

        with pytest.raises(NoTexturesFoundError):
            convert(buffer)

    def test_invalid_container(self):
        with pytest.raises(InvalidContainerError):
            convert(b"BNTX")

    def test_textures_are_independent(self):
        first = TextureSpec(name="first", data=_data(256))
        second = TextureSpec(name="second", data=bytes(256))

        together = convert(build_bntx([first, second]))
        alone = convert(build_bntx([first]))

        assert together[0] == alone[0]
        assert together[1].payload == bytes(256)
