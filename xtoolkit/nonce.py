"""Nonce strings drawn from letters and digits."""

from __future__ import annotations

from xtoolkit.rand import rand_some_from

NONCE_SYMBOLS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
NONCE_LENGTH = 32


def generate_nonce() -> str:
    """A NONCE_LENGTH string taken from NONCE_SYMBOLS by ``rand_some_from``."""
    return "".join(rand_some_from(NONCE_SYMBOLS, NONCE_LENGTH))