"""An nginx-style configuration parser and a listening socket for a web server."""

__version__ = "0.1.0"
__all__ = ["__version__"]