"""Path and string helpers, a resource archive reader, file-system types and thread-based task primitives."""

__version__ = "0.1.0"

__all__ = ["errors", "path", "text", "resources", "fs", "osport"]