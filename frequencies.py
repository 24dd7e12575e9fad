# filename: frequencies.py

from collections import Counter

# End-of-line sentinel that is never counted as a symbol.
TERMINATOR = "\n"


def frequencies(text, terminator=TERMINATOR):
    freqs = Counter(text)
    freqs.pop(terminator, None)
    return freqs


def read_frequencies(path, encoding="utf-8"):
    # I/O errors are left to the caller
    with open(path, "r", encoding=encoding) as f:
        return frequencies(f.read())
