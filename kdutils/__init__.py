"""General-purpose utilities: byte arrays, flags, timers, paths, URLs, files, memory mapping and logging."""

__version__ = "0.1.0"

__all__ = [
    "bytearray",
    "flags",
    "elapsedtimer",
    "dir",
    "url",
    "file",
    "file_mapper",
    "logger",
]