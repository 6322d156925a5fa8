"""Command that reads an NBT file, gzipped or not, and writes it back out."""

import argparse
import gzip
import sys
import zlib

from .decode import read
from .encode import write
from .errors import NbtError

__all__ = ["load_input", "main"]


def load_input(path):
    """Return the file's bytes, gunzipped when they are valid gzip data."""
    with open(path, "rb") as handle:
        raw = handle.read()
    try:
        return gzip.decompress(raw)
    except (OSError, EOFError, zlib.error):
        return raw


def main(argv=None):
    """Read an NBT document and write it out again; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="tapenbt", description="Read an NBT document and write it back out."
    )
    parser.add_argument("input", help="NBT file, optionally gzip-compressed")
    parser.add_argument("-o", "--output", help="file to write to (default: standard output)")
    args = parser.parse_args(argv)

    try:
        data = load_input(args.input)
    except OSError as exc:
        print(f"tapenbt: {exc}", file=sys.stderr)
        return 1
    try:
        nbt = read(data)
    except NbtError as exc:
        print(f"tapenbt: {args.input}: {exc}", file=sys.stderr)
        return 1

    out = write(nbt)
    if args.output:
        with open(args.output, "wb") as handle:
            handle.write(out)
    else:
        sys.stdout.buffer.write(out)
        sys.stdout.buffer.flush()
    return 0