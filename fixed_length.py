# filename: fixed_length.py

from huffman_core import EmptyAlphabetError


def code_length(n):
    """Digits needed to give each of `n` symbols a distinct equal-length code.

    A single symbol still gets a one-digit code rather than an empty one.
    """
    if n <= 0:
        raise EmptyAlphabetError("cannot assign fixed-length codes to an empty alphabet")
    if n == 1:
        return 1
    # ceil(log2(n)) without going through floats
    return (n - 1).bit_length()


def simple_encoding(freqs):
    # Counts are ignored, only the symbols and their order matter
    length = code_length(len(freqs))
    return {symbol: format(number, f"0{length}b") for number, symbol in enumerate(freqs)}
