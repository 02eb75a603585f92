"""printf-style formatting, ANSI log helpers, fixed-width integers and ELF constants and structures."""

__version__ = "0.1.0"

__all__ = ["ansi", "elfconst", "elfdyn", "elfreloc", "elfstructs", "intlimits", "printf"]