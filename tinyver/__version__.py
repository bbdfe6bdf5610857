"""tinyver version; the string follows the grammar tinyver itself parses."""

__version__ = "0.1.0"
