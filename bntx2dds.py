#!/usr/bin/env python3.10
# -*- coding: utf-8 -*-

import argparse
import logging
import os
import os.path
import sys

from bntx_parse import BNTX
from convert import convert
from errors import BNTXError

logger = logging.getLogger(__name__)


def _main():
    args = _parse_command_line()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        return args.func(args)
    except (BNTXError, OSError) as e:
        logger.error("%s", e)
        return 1


def _handle_extract(args):
    buffer = _read_file(args.input_filename)
    images = convert(buffer)

    output_directory = _clean_path(args.output_directory)
    os.makedirs(output_directory, exist_ok=True)

    saved = 0
    for index, image in enumerate(images):
        filename = os.path.join(
            output_directory, _output_filename(image.name, index)
        )
        try:
            with open(filename, mode="wb") as output_file:
                output_file.write(image.header)
                output_file.write(image.payload)
        except OSError as e:
            logger.error("Failed to create %s: %s", filename, e)
            continue
        saved += 1
        print(f"Saved: {filename}")

    print(f"Finished! {saved} textures extracted to '{output_directory}'")

    return 0 if saved == len(images) else 1


def _handle_info(args):
    bntx = BNTX.parse(_read_file(args.input_filename))

    print(f"File name: {bntx.name}")
    print(f"File size: {bntx.file_size}")
    print(f"Textures count: {len(bntx.textures)}")

    for index, texture in enumerate(bntx.textures, start=1):
        print()
        print(f"=== Image {index} ===")
        print(f"Name: {texture.name}")
        print(f"Width: {texture.width}")
        print(f"Height: {texture.height}")
        print(f"Format: {texture.format_name}")
        print(f"TileMode: {'LINEAR' if texture.is_linear else 'BLOCK_LINEAR'}")
        print(f"Block Height: {texture.block_height}")
        print(f"Image Size: {texture.image_size}")

    return 0


def _output_filename(name: str, index: int) -> str:
    # Texture names come from the file and must not leave the output directory
    name = name.replace("/", "_").replace("\\", "_")
    if name in ("", ".", ".."):
        name = f"texture_{index}"
    return f"{name}.dds"


def _read_file(filename: str) -> bytes:
    with open(_clean_path(filename), mode="rb") as input_file:
        return input_file.read()


def _clean_path(path: str) -> str:
    # Paths pasted from a file manager often come quoted
    if path[:1] in ("'", '"'):
        path = path[1:]
    if path[-1:] in ("'", '"'):
        path = path[:-1]
    return path


def _parse_command_line() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert BNTX textures to DDS")

    parser.add_argument("input_filename", help="Input BNTX file")

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Print texture details"
    )

    subparsers = parser.add_subparsers(required=True)

    parser_extract = subparsers.add_parser("extract", help="Extract textures as DDS")

    parser_extract.add_argument("output_directory", help="Output directory")

    parser_extract.set_defaults(func=_handle_extract)

    parser_info = subparsers.add_parser("info", help="List the textures")

    parser_info.set_defaults(func=_handle_info)

    return parser.parse_args()


if __name__ == "__main__":
    sys.exit(_main())
