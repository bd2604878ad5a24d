"""Console tools: a Huffman coder, a paged line editor and an employee registry."""

__version__ = "0.1.0"
__all__ = ["huffman", "editor", "employees"]