"""headr: print the leading lines or bytes of files and standard input."""

__all__ = ["__version__"]

__version__ = "0.1.0"
