"""Programming exercises and an AES-128 block cipher."""

__version__ = "0.1.0"