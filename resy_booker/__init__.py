"""Books a Resy reservation by driving a Chrome browser."""

__version__ = "0.1.0"
