# filename: huffman_service.py

from collections import Counter

from bitarray import bitarray

from fixed_length import simple_encoding
from huffman_core import HuffmanLogic, weighted_length


class HuffmanService:
    def __init__(self):
        self.logic = HuffmanLogic()

    def optimal_encoding(self, freqs):
        return self.logic.generate_codes(self.logic.build_tree(freqs))

    def encodings(self, freqs):
        return {
            "simple": simple_encoding(freqs),
            "optimal": self.optimal_encoding(freqs),
        }

    def savings(self, freqs):
        """Return (simple_bits, optimal_bits) for writing out every counted symbol."""
        tables = self.encodings(freqs)
        return (
            weighted_length(tables["simple"], freqs),
            weighted_length(tables["optimal"], freqs),
        )

    def compress(self, data):
        # The tree is returned alongside the bits since decoding walks it
        tree = self.logic.build_tree(Counter(data))
        codes = self.logic.generate_codes(tree)

        encoded = bitarray()
        encoded.encode({symbol: bitarray(code) for symbol, code in codes.items()}, data)
        return tree, encoded

    def decompress(self, tree, encoded):
        if isinstance(encoded, bitarray):
            encoded = encoded.to01()
        return self.logic.decode(tree, encoded)
