"""Super Mario World ROM data tools: decompression, tiles, colours, palettes and 65816 instruction decoding."""

__version__ = "0.1.0"