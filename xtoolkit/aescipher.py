"""AES in CBC, CFB, ECB and GCM modes, with pluggable block padding."""

from __future__ import annotations

import hashlib
from typing import Callable, Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers import Cipher as _Cipher
from cryptography.hazmat.primitives.ciphers import algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from xtoolkit.base import BASE64
from xtoolkit.padding import Pad, PaddingError
from xtoolkit.rand import rand_string

AES_BLOCK_SIZE = 16
PKC5_SALT_LEN = 8
PKC5_DEFAULT_ITER = 2048
PKC5_DEFAULT_MAGIC_WORD = "Salted__"
MAX_IV_LEN = 16
GCM_NONCE_SIZE = 12
DEFAULT_SALT_HASH = "md5"

CipherFunc = Callable[[bytes, bytes, bytes, Pad], bytes]
"""A function (data, key, iv, pad) -> bytes used by the salted helpers."""


def _crypt(key: bytes, mode: modes.Mode, data: bytes, encrypt: bool) -> bytes:
    cipher = _Cipher(algorithms.AES(bytes(key)), mode)
    context = cipher.encryptor() if encrypt else cipher.decryptor()
    return context.update(bytes(data)) + context.finalize()


def _check_key(key: bytes) -> bytes:
    key = bytes(key)
    algorithms.AES(key)  # raises ValueError for an invalid key size
    return key


def _derive(key: bytes, salt: bytes, iterations: int, hash_name: str) -> tuple[bytes, bytes]:
    derived_key = hashlib.pbkdf2_hmac(hash_name, key, salt, iterations, len(key))
    derived_iv = hashlib.pbkdf2_hmac(hash_name, derived_key, salt, iterations, MAX_IV_LEN)
    return derived_key, derived_iv


class CBC:
    """AES-CBC; the key length selects AES-128, -192 or -256."""

    def encrypt(self, data: bytes, key: bytes, iv: bytes, pad: Pad) -> bytes:
        key = _check_key(key)
        padded = pad.padding(bytes(data), AES_BLOCK_SIZE)
        return _crypt(key, modes.CBC(bytes(iv)[:AES_BLOCK_SIZE]), padded, True)

    def decrypt(self, encrypted: bytes, key: bytes, iv: bytes, pad: Pad) -> bytes:
        """Decrypt; data whose padding does not check out comes back empty."""
        key = _check_key(key)
        plain = _crypt(key, modes.CBC(bytes(iv)[:AES_BLOCK_SIZE]), bytes(encrypted), False)
        try:
            return pad.unpadding(plain, AES_BLOCK_SIZE)
        except PaddingError:
            return b""

    def encrypt_base64(self, data: bytes, key: bytes, iv: bytes, pad: Pad) -> str:
        """Encrypt and return the ciphertext as standard Base64 text."""
        return BASE64.encode(self.encrypt(data, key, iv, pad))

    def decrypt_base64(self, encrypted: str | bytes, key: bytes, iv: bytes, pad: Pad) -> bytes:
        """Decode Base64 ciphertext and decrypt it."""
        return self.decrypt(BASE64.decode(encrypted), key, iv, pad)

    def encrypt_with_salt(
        self,
        data: bytes,
        key: bytes,
        iterations: int = PKC5_DEFAULT_ITER,
        magic: str = PKC5_DEFAULT_MAGIC_WORD,
        hash_name: Optional[str] = None,
        pad: Optional[Pad] = None,
        cipher: Optional[CipherFunc] = None,
    ) -> bytes:
        """Derive key and IV with PBKDF2 from a random salt; output is magic + salt + ciphertext."""
        if pad is None:
            raise ValueError("a padding scheme is required")
        if iterations <= 0:
            iterations = PKC5_DEFAULT_ITER
        hash_name = hash_name or DEFAULT_SALT_HASH
        cipher = cipher or self.encrypt
        salt = rand_string(PKC5_SALT_LEN).encode("ascii")
        derived_key, derived_iv = _derive(bytes(key), salt, iterations, hash_name)
        encrypted = cipher(bytes(data), derived_key, derived_iv, pad)
        return magic.encode("utf-8") + salt + encrypted

    def decrypt_with_salt(
        self,
        encrypted: bytes,
        key: bytes,
        iterations: int = PKC5_DEFAULT_ITER,
        magic: str = PKC5_DEFAULT_MAGIC_WORD,
        hash_name: Optional[str] = None,
        pad: Optional[Pad] = None,
        cipher: Optional[CipherFunc] = None,
    ) -> bytes:
        """Reverse ``encrypt_with_salt``."""
        if pad is None:
            raise ValueError("a padding scheme is required")
        if iterations <= 0:
            iterations = PKC5_DEFAULT_ITER
        hash_name = hash_name or DEFAULT_SALT_HASH
        cipher = cipher or self.decrypt
        encrypted = bytes(encrypted)
        prefix = len(magic.encode("utf-8"))
        if len(encrypted) < prefix + PKC5_SALT_LEN:
            raise ValueError("salted ciphertext too short")
        salt = encrypted[prefix : prefix + PKC5_SALT_LEN]
        derived_key, derived_iv = _derive(bytes(key), salt, iterations, hash_name)
        return cipher(encrypted[prefix + PKC5_SALT_LEN :], derived_key, derived_iv, pad)


class CFB:
    """AES-CFB (full-block feedback) over padded data."""

    def encrypt(self, data: bytes, key: bytes, iv: bytes, pad: Pad) -> bytes:
        key = _check_key(key)
        padded = pad.padding(bytes(data), AES_BLOCK_SIZE)
        return _crypt(key, modes.CFB(bytes(iv)[:AES_BLOCK_SIZE]), padded, True)

    def decrypt(self, encrypted: bytes, key: bytes, iv: bytes, pad: Pad) -> bytes:
        key = _check_key(key)
        plain = _crypt(key, modes.CFB(bytes(iv)[:AES_BLOCK_SIZE]), bytes(encrypted), False)
        return pad.unpadding(plain, AES_BLOCK_SIZE)


class ECB:
    """AES-ECB; the iv argument is ignored."""

    def encrypt(self, data: bytes, key: bytes, iv: bytes | None, pad: Pad) -> bytes:
        key = _check_key(key)
        padded = pad.padding(bytes(data), AES_BLOCK_SIZE)
        return _crypt(key, modes.ECB(), padded, True)

    def decrypt(self, encrypted: bytes, key: bytes, iv: bytes | None, pad: Pad) -> bytes:
        key = _check_key(key)
        plain = _crypt(key, modes.ECB(), bytes(encrypted), False)
        return pad.unpadding(plain, AES_BLOCK_SIZE)


class GCM:
    """AES-GCM with a 12-byte nonce; padding is not used."""

    @staticmethod
    def _open(key: bytes, nonce: bytes, encrypted: bytes, additional: bytes | None) -> bytes:
        try:
            return AESGCM(key).decrypt(nonce, encrypted, additional)
        except InvalidTag as exc:
            raise ValueError("cipher: message authentication failed") from exc

    @staticmethod
    def _check_nonce(nonce: bytes) -> None:
        if len(nonce) != GCM_NONCE_SIZE:
            raise ValueError(f"invalid nonce size, must contain {GCM_NONCE_SIZE} characters")

    def encrypt(self, data: bytes, key: bytes, additional: bytes | None = None, pad: Pad | None = None) -> bytes:
        """Encrypt with a random nonce, which is prepended to the output."""
        aead = AESGCM(bytes(key))
        nonce = rand_string(GCM_NONCE_SIZE).encode("ascii")
        return nonce + aead.encrypt(nonce, bytes(data), additional)

    def decrypt(self, encrypted: bytes, key: bytes, additional: bytes | None = None, pad: Pad | None = None) -> bytes:
        """Decrypt output of ``encrypt``: the first 12 bytes are the nonce."""
        key = bytes(key)
        AESGCM(key)
        encrypted = bytes(encrypted)
        if len(encrypted) < GCM_NONCE_SIZE:
            raise ValueError("ciphertext too short")
        return self._open(key, encrypted[:GCM_NONCE_SIZE], encrypted[GCM_NONCE_SIZE:], additional)

    def encrypt_with_nonce(self, data: bytes, key: bytes, nonce: bytes, additional: bytes | None = None) -> bytes:
        """Encrypt with a caller-supplied nonce; the nonce is not included in the output."""
        aead = AESGCM(bytes(key))
        nonce = bytes(nonce)
        self._check_nonce(nonce)
        return aead.encrypt(nonce, bytes(data), additional)

    def decrypt_with_nonce(self, encrypted: bytes, key: bytes, nonce: bytes, additional: bytes | None = None) -> bytes:
        key = bytes(key)
        AESGCM(key)
        nonce = bytes(nonce)
        self._check_nonce(nonce)
        return self._open(key, nonce, bytes(encrypted), additional)