"""Loading PEM certificates and RSA keys, and RSA PKCS#1 v1.5 signing."""

from __future__ import annotations

import base64
import binascii
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from cryptography import x509
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding as _rsa_padding
from cryptography.hazmat.primitives.asymmetric import rsa

from xtoolkit.hashing import VerificationError

_PEM_RE = re.compile(r"-----BEGIN ([^\r\n]*?)-----(.*?)-----END \1-----", re.DOTALL)

_HASHES = {
    "md5": hashes.MD5,
    "sha1": hashes.SHA1,
    "sha224": hashes.SHA224,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}

_LOAD_ERRORS = (ValueError, TypeError, UnsupportedAlgorithm)


class PemError(ValueError):
    """Raised when PEM text or a file holding it cannot be loaded."""


def _decode_pem(text: Union[str, bytes]) -> Optional[tuple[str, bytes]]:
    if isinstance(text, bytes):
        text = text.decode("ascii", "replace")
    match = _PEM_RE.search(text)
    if match is None:
        return None
    kind, body = match.group(1), match.group(2)
    lines = [line.strip() for line in body.splitlines() if ":" not in line]
    try:
        der = base64.b64decode("".join(lines), validate=True)
    except (binascii.Error, ValueError):
        return None
    return kind, der


def load_certificate(text: Union[str, bytes]) -> x509.Certificate:
    """Load an X.509 certificate from PEM text."""
    block = _decode_pem(text)
    if block is None:
        raise PemError("decode certificate err")
    kind, der = block
    if kind != "CERTIFICATE":
        raise PemError("the kind of PEM should be CERTIFICATE")
    try:
        return x509.load_der_x509_certificate(der)
    except _LOAD_ERRORS as exc:
        raise PemError(f"parse certificate err:{exc}") from exc


def load_private_key(text: Union[str, bytes]) -> rsa.RSAPrivateKey:
    """Load an RSA private key in PKCS#1 or PKCS#8 form from a PRIVATE KEY block."""
    block = _decode_pem(text)
    if block is None:
        raise PemError("decode private key err")
    kind, der = block
    if kind != "PRIVATE KEY":
        raise PemError(f"the kind of PEM should be PRIVATE KEY, not {kind}")
    try:
        key = serialization.load_der_private_key(der, password=None)
    except _LOAD_ERRORS as exc:
        raise PemError(f"parse private key err:{exc}") from exc
    if not isinstance(key, rsa.RSAPrivateKey):
        raise PemError("not a RSA private key")
    return key


def load_public_key(text: Union[str, bytes]) -> rsa.RSAPublicKey:
    """Load an RSA public key from a PKIX PUBLIC KEY block."""
    block = _decode_pem(text)
    if block is None:
        raise PemError("decode public key error")
    kind, der = block
    if kind != "PUBLIC KEY":
        raise PemError(f"the kind of PEM should be PUBLIC KEY, not {kind}")
    try:
        key = serialization.load_der_public_key(der)
    except _LOAD_ERRORS as exc:
        raise PemError(f"parse public key err:{exc}") from exc
    if not isinstance(key, rsa.RSAPublicKey):
        raise PemError("public key is not rsa public key")
    return key


def _read(path: Union[str, Path], what: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise PemError(f"read {what} pem file err:{exc}") from exc


def load_certificate_from_path(path: Union[str, Path]) -> x509.Certificate:
    return load_certificate(_read(path, "certificate"))


def load_private_key_from_path(path: Union[str, Path]) -> rsa.RSAPrivateKey:
    return load_private_key(_read(path, "private"))


def load_public_key_from_path(path: Union[str, Path]) -> rsa.RSAPublicKey:
    return load_public_key(_read(path, "public"))


def certificate_serial_number(certificate: x509.Certificate) -> str:
    """The serial number's big-endian bytes as upper-case hex."""
    serial = certificate.serial_number
    return serial.to_bytes((serial.bit_length() + 7) // 8, "big").hex().upper()


def _as_utc(moment: datetime) -> datetime:
    # A naive datetime is taken as local time.
    return moment.astimezone(timezone.utc)


def _not_after(certificate: x509.Certificate) -> datetime:
    try:
        return certificate.not_valid_after_utc
    except AttributeError:
        return certificate.not_valid_after.replace(tzinfo=timezone.utc)


def _not_before(certificate: x509.Certificate) -> datetime:
    try:
        return certificate.not_valid_before_utc
    except AttributeError:
        return certificate.not_valid_before.replace(tzinfo=timezone.utc)


def is_certificate_expired(certificate: x509.Certificate, now: datetime) -> bool:
    """True when now lies after the certificate's end of validity."""
    return _as_utc(now) > _not_after(certificate)


def is_certificate_valid(certificate: x509.Certificate, now: datetime) -> bool:
    """True when now lies strictly inside the validity period."""
    moment = _as_utc(now)
    return _not_before(certificate) < moment < _not_after(certificate)


class RSAMethod:
    """Signs with RSA PKCS#1 v1.5 over a hash of the data."""

    def __init__(
        self,
        hash_name: str,
        private_key: Optional[rsa.RSAPrivateKey] = None,
        public_key: Optional[rsa.RSAPublicKey] = None,
    ) -> None:
        try:
            self._hash = _HASHES[hash_name.lower()]()
        except KeyError:
            raise ValueError(f"unsupported hash {hash_name!r}") from None
        self._private_key = private_key
        self._public_key = public_key

    @staticmethod
    def _bytes(data: Union[str, bytes]) -> bytes:
        return data.encode("utf-8") if isinstance(data, str) else bytes(data)

    def sign(self, data: Union[str, bytes]) -> bytes:
        if self._private_key is None:
            raise ValueError("no private key to sign with")
        return self._private_key.sign(self._bytes(data), _rsa_padding.PKCS1v15(), self._hash)

    def verify(self, data: Union[str, bytes], signature: bytes) -> None:
        """Raise VerificationError unless signature is valid for data."""
        if self._public_key is None:
            raise ValueError("no public key to verify with")
        try:
            self._public_key.verify(bytes(signature), self._bytes(data), _rsa_padding.PKCS1v15(), self._hash)
        except InvalidSignature as exc:
            raise VerificationError() from exc