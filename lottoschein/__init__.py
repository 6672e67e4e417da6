"""Console lottery ticket generators for Lotto 6 aus 49 and Eurolotto."""

__version__ = "1.0.0"