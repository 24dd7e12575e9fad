# filename: huffman_core.py

import heapq
from itertools import count

# Digit appended when descending to the left / right child.
LEFT_BIT = "1"
RIGHT_BIT = "0"
# Code given to the only symbol of a one-symbol alphabet.
SINGLE_SYMBOL_CODE = "0"


class EmptyAlphabetError(ValueError):
    """Raised when a frequency table has no symbols to encode."""


class Leaf:
    is_leaf = True

    def __init__(self, symbol, weight):
        self.symbol = symbol
        self.weight = weight

    def __repr__(self):
        return f"Leaf({self.symbol!r}, {self.weight})"


class Internal:
    is_leaf = False

    def __init__(self, left, right):
        self.left = left
        self.right = right
        self.weight = left.weight + right.weight

    def __repr__(self):
        return f"Internal({self.weight}, {self.left!r}, {self.right!r})"


class NodeQueue:
    """Min-heap of tree nodes keyed by weight.

    Nodes of equal weight come out in the order they were inserted: every
    entry carries a sequence number taken from a per-queue counter.
    """

    def __init__(self):
        self._heap = []
        self._sequence = count()

    def insert(self, node):
        heapq.heappush(self._heap, (node.weight, next(self._sequence), node))

    def extract_min(self):
        if not self._heap:
            raise IndexError("extract_min from an empty NodeQueue")
        return heapq.heappop(self._heap)[2]

    def size(self):
        return len(self._heap)

    __len__ = size


def validate_frequencies(freqs):
    if not freqs:
        raise EmptyAlphabetError("frequency table is empty")
    for symbol, freq in freqs.items():
        if isinstance(freq, bool) or not isinstance(freq, int) or freq <= 0:
            raise ValueError(f"count for {symbol!r} must be a positive integer, got {freq!r}")


def weighted_length(codes, freqs):
    """Total number of bits needed to write every counted symbol with `codes`."""
    return sum(freq * len(codes[symbol]) for symbol, freq in freqs.items())


class HuffmanLogic:
    def build_tree(self, freqs):
        validate_frequencies(freqs)
        # One leaf per symbol, seeded in table order
        queue = NodeQueue()
        for symbol, freq in freqs.items():
            queue.insert(Leaf(symbol, freq))

        # Iteratively merge the two lightest nodes to form the binary tree
        while queue.size() > 1:
            left = queue.extract_min()
            right = queue.extract_min()
            queue.insert(Internal(left, right))

        return queue.extract_min()

    def generate_codes(self, root):
        if root.is_leaf:
            return {root.symbol: SINGLE_SYMBOL_CODE}

        codes = {}
        stack = [(root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_leaf:
                codes[node.symbol] = prefix
                continue
            # right is pushed first so the left subtree is visited first
            stack.append((node.right, prefix + RIGHT_BIT))
            stack.append((node.left, prefix + LEFT_BIT))
        return codes

    def decode(self, root, bits):
        """Walk the tree once per code word in `bits` (a string of 0/1 digits).

        Returns the decoded symbols as a list. Raises ValueError on a digit
        the tree has no branch for, or when `bits` stops inside a code word.
        """
        symbols = []
        if root.is_leaf:
            for bit in bits:
                if bit != SINGLE_SYMBOL_CODE:
                    raise ValueError(f"unexpected digit {bit!r} for a one-symbol code")
                symbols.append(root.symbol)
            return symbols

        node = root
        for bit in bits:
            if bit == LEFT_BIT:
                node = node.left
            elif bit == RIGHT_BIT:
                node = node.right
            else:
                raise ValueError(f"invalid digit {bit!r} in encoded bits")
            if node.is_leaf:
                symbols.append(node.symbol)
                node = root
        if node is not root:
            raise ValueError("encoded bits end in the middle of a code word")
        return symbols
