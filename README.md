# xtoolkit

A collection of small helpers for everyday Python code: string and
version utilities, phone number handling, random values, block padding,
Base64/Base62 codecs, AES, hashing and signing, time calculations,
timers, thread-safe primitives and file utilities.

## Installation

```
pip install xtoolkit
```

The only runtime dependency is `cryptography`. To run the test suite,
install the `test` extra:

```
pip install "xtoolkit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `xtoolkit.strings` | `uc_first`, `sbc_to_dbc` (full-width to half-width), `concat`, `str_len`, `filter_emoji`, `any_to_string` (compact JSON, empty string on failure) |
| `xtoolkit.version` | `VersionCmp`: compares dotted version strings by zero-padding each component |
| `xtoolkit.phone` | `parse_phone`, `world_phone`, `world_phone_fmt`, `standard_phone`, `regular_phone`, `regexp_phone_verify` with `PhoneVerifyRequest` / `PhoneVerifyResult` and the per-region table `PHONE_REGEXP_MAP` |
| `xtoolkit.future` | `Future` runs a callable on a background thread; `get(timeout)` returns its result or re-raises its exception; `wait_all_futures` |
| `xtoolkit.rand` | `Random` (draws on a 1–10000 probability scale), `wave`, `rand_between`, `choose_m_n`, `rand_string`, `rand_digit`, `rand_once_from`, `rand_some_from` |
| `xtoolkit.padding` | `NoPad`, `Pkcs7` (also `PKCS5`), `ZeroPad`, `AnsiX923`, `Iso7816`; invalid padding raises `PaddingError` |
| `xtoolkit.base62` | `B62Encoding` (base64 layout over a 62-symbol alphabet), `B62_STD_ENCODING`, `B62StreamEncoder`, `B62StreamDecoder`, `CorruptInputError` |
| `xtoolkit.base` | `Base64Codec`, `Base64UrlCodec`, `Base62Codec`, with `BASE64`, `BASE64_URL`, `BASE62` instances; `s_encode` / `s_decode` work on text |
| `xtoolkit.aescipher` | AES in `CBC`, `CFB`, `ECB` and `GCM` modes; CBC adds Base64 helpers and PBKDF2-salted encryption |
| `xtoolkit.hashing` | `md5_hex`, `sha1_hex`, `sha256_hex`, `sha512_hex`, `hmac_hex`, `hmac_sha1`, `hmac_sha256`, `hmac_md5`, `HashMethod`, `VerificationError` |
| `xtoolkit.signer` | `Signer`, `SignOptions`, `DefaultEncoder`: sign and verify sorted `key=value` parameter sets or raw bytes |
| `xtoolkit.keys` | PEM loading of certificates and RSA keys (from text or path), certificate serial and validity checks, `RSAMethod` (PKCS#1 v1.5), `PemError` |
| `xtoolkit.nonce` | `generate_nonce` |
| `xtoolkit.stack` | `Stack`, a LIFO stack |
| `xtoolkit.safefun` | `RollbackOp` runs undo steps newest first, raising `RollbackError` if any fail; `fun_wrapper` returns a `PanicError` instead of raising; `dump_stack` |
| `xtoolkit.timeutil` | Start/end of day, week, month and year; `TimeType` windows via `get_time_se` / `get_time_se2`; local-time stamp helpers; `RunTimeStat` |
| `xtoolkit.window` | `HandTimeChecker`, `AbsTimeChecker`, `NatureDayTimeChecker`, `time_checker_factory`, `check_need_update`, `check_need_update2` |
| `xtoolkit.timers` | `BackOffCtrl` (doubling back-off), `Timer` (periodic callback with trigger/stop), `RandTicker` (jittered ticks); all times in seconds |
| `xtoolkit.sync2` | `AtomicInt`, `AtomicDuration`, `AtomicBool`, `AtomicString`, `Semaphore` (optional acquire timeout), `Mutex` (with `try_lock`) |
| `xtoolkit.files` | `file_exists`, `is_file`, `file_size`, `copy_file`, `line_count`, `each_line`, `read_lines`, `put_file`, `dir_size`, `each_file` and more |

## Examples

AES-CBC with PKCS#7 padding:

```python
from xtoolkit.aescipher import CBC
from xtoolkit.padding import Pkcs7

cbc = CBC()
key = b"test-key-aes-128"
iv = b"1234567890abcdef"
encrypted = cbc.encrypt(b"test data", key, iv, Pkcs7())
assert encrypted.hex() == "ecddfa122db3975e5534b3809a9d8def"
assert cbc.decrypt(encrypted, key, iv, Pkcs7()) == b"test data"
```

Signing a parameter set (MD5 digest by default):

```python
from xtoolkit.signer import Signer, SignOptions

signer = Signer()
options = SignOptions(suffix="&app=demo", ignores={"sign"})
signature = signer.sign_values({"b": ["2"], "a": ["1"]}, options)
signer.verify_values({"a": ["1"], "b": ["2"]}, signature, options)  # raises VerificationError on mismatch
```

Comparing versions:

```python
from xtoolkit.version import VersionCmp

assert VersionCmp("1.10.0").gt("1.9.3")
```

Phone numbers:

```python
from xtoolkit.phone import world_phone_fmt, standard_phone

world_phone_fmt("13800000000")        # "86-13800000000"
standard_phone("13800000000", True)   # "86-138****0000"
```

Rolling back steps:

```python
from xtoolkit.safefun import RollbackOp

undo = RollbackOp()
undo.add(lambda: print("undo step one"))
undo.add(lambda: print("undo step two"))
undo.rollback()  # runs step two, then step one
```

Reading lines lazily:

```python
from xtoolkit.files import read_lines

for line in read_lines("data.txt"):
    print(line)
```

## Errors

Failures are raised as exceptions: `PaddingError` from the padding
schemes, `CorruptInputError` from Base62 decoding, `VerificationError`
when a signature does not match, `PemError` when a PEM block cannot be
loaded, `RollbackError` when rollback steps fail, `EmptyArgumentsError`
for empty path arguments in `xtoolkit.files`, and `ValueError` /
`TimeoutError` elsewhere as documented on each function.

## What this package does not do

It is a library only: it has no command-line tool. It contains no HTTP
client helpers, no locks or counters backed by a Redis server, no
spreadsheet handling, no circuit breaker or rate limiter, and no worker
pool. Base62 encoding raises `ValueError` for input whose 6-bit groups
fall outside the 62-symbol alphabet.