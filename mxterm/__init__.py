"""Terminal emulator building blocks: escape sequence handling, grid operations, SGR, character sets and keyboard sequences."""

__version__ = "0.3.2010"