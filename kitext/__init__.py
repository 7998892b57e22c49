"""Text-editor building blocks: gap buffer, search, string and number helpers, paths, INI settings and file I/O."""

__version__ = "0.1.0"

__all__ = [
    "numconv",
    "strcompare",
    "search",
    "gapbuffer",
    "inifile",
    "paths",
    "files",
]