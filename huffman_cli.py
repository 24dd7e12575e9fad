#!/usr/bin/env python3
"""
Command line front end for the Huffman code builder.

Counts the characters of a text file (end-of-line characters excluded),
then prints the frequency table, a fixed-length baseline code and the
optimal Huffman code, followed by the total bits each code needs.

Run with:
    huffman-codes path/to/file.txt
"""
import sys
import argparse

from frequencies import read_frequencies
from huffman_core import EmptyAlphabetError
from huffman_service import HuffmanService


def main(argv=None):
    """Main entry point for the code builder."""
    parser = argparse.ArgumentParser(description="Compare fixed-length and Huffman codes for a text file")
    parser.add_argument("filename", help="Text file whose characters are counted")
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the input file (default: utf-8)"
    )

    args = parser.parse_args(argv)

    try:
        freqs = read_frequencies(args.filename, encoding=args.encoding)
    except (OSError, UnicodeDecodeError):
        print("Could not read file.")
        return 1

    service = HuffmanService()
    try:
        tables = service.encodings(freqs)
        simple_bits, optimal_bits = service.savings(freqs)
    except EmptyAlphabetError as e:
        print(f"Nothing to encode: {e}")
        return 1

    print(f"Frequencies: {dict(freqs)}")
    print(f"Simple encoding: {tables['simple']}")
    print(f"Optimal encoding: {tables['optimal']}")
    print(f"Simple encoding size: {simple_bits} bits")
    print(f"Optimal encoding size: {optimal_bits} bits")

    return 0


if __name__ == "__main__":
    sys.exit(main())
