"""Heaps, Huffman coding, graph traversals, shortest paths, spanning trees and hash tables."""

__version__ = "0.1.0"