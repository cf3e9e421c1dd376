"""Error fingerprinting and redaction.

Turns raw failure text into two stable values:

- an error code (``IMG_SEARCH_XXXXXXXX``) derived from a 32-bit rolling hash,
  used to group identical failures across processes
- a redacted message with credential-like tokens masked

Both are pure functions of their input text.

Usage:
    ```python
    from image_search.fingerprint import generate_error_code, sanitize_error_message

    code = generate_error_code(exc)
    safe = sanitize_error_message("upstream failed: api_key=abc123")
    # "upstream failed: api_key=***"
    ```
"""

import re
import traceback

ERROR_CODE_PREFIX = "IMG_SEARCH_"

# Applied in order; keywords are disjoint so order does not change the result.
_REDACTION_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"api[_-]?key[s]?[=:]\s*[\w-]+", re.IGNORECASE | re.ASCII), "api_key=***"),
    (re.compile(r"token[s]?[=:]\s*[\w-]+", re.IGNORECASE | re.ASCII), "token=***"),
    (re.compile(r"password[s]?[=:]\s*[\w-]+", re.IGNORECASE | re.ASCII), "password=***"),
]

_UINT32 = 0xFFFFFFFF


def simple_hash(text: str) -> str:
    """Compute a non-cryptographic 32-bit rolling hash of ``text``.

    Accumulates ``hash * 31 + code_unit`` with 32-bit wraparound over the
    UTF-16 code units of the text, reinterprets the result as a signed
    integer and returns its absolute value as lowercase hex.

    Args:
        text: Input text

    Returns:
        Lowercase hexadecimal string, 1 to 8 characters long
    """
    value = 0
    data = text.encode("utf-16-le", errors="surrogatepass")
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        value = (value * 31 + code_unit) & _UINT32

    if value & 0x80000000:
        value -= 1 << 32
    return format(abs(value), "x")


def error_identity(error: BaseException | str) -> str:
    """Return the text that identifies a failure for fingerprinting.

    The formatted traceback is used when the exception has been raised,
    otherwise the message.
    """
    if isinstance(error, BaseException) and error.__traceback__ is not None:
        return "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return str(error)


def generate_error_code(error: BaseException | str) -> str:
    """Derive a deterministic error code from a failure.

    Args:
        error: Exception or plain failure message

    Returns:
        ``IMG_SEARCH_`` followed by up to 8 uppercase hex characters
    """
    digest = simple_hash(error_identity(error))
    return f"{ERROR_CODE_PREFIX}{digest[:8].upper()}"


def sanitize_error_message(message: str) -> str:
    """Mask API keys, tokens and passwords in an error message.

    Args:
        message: Raw error text

    Returns:
        Text with every credential-like token replaced by a fixed mask
    """
    for pattern, replacement in _REDACTION_RULES:
        message = pattern.sub(replacement, message)
    return message
