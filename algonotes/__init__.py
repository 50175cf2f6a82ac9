"""Classic algorithms for graphs, trees, grids, searching, arrays, number theory, bits and backtracking."""

__version__ = "0.1.0"