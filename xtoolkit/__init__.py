"""Everyday helpers for strings, phone numbers, random values, padding, codecs, AES, signing, time, timers, synchronisation and files."""

__version__ = "0.1.0"

__all__ = [
    "aescipher",
    "base",
    "base62",
    "files",
    "future",
    "hashing",
    "keys",
    "nonce",
    "padding",
    "phone",
    "rand",
    "safefun",
    "signer",
    "stack",
    "strings",
    "sync2",
    "timers",
    "timeutil",
    "version",
    "window",
]