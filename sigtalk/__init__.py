"""Bit-by-bit text messaging between processes over SIGUSR1 and SIGUSR2."""

__version__ = "0.1.0"