"""Support routines for an IRC/XDCC client: MD5 hashing, argument splitting, number formatting and CTCP."""

__version__ = "0.1.0"

__all__ = ["merkle", "md5", "args", "numfmt", "ircutil"]