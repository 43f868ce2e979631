import base64
import binascii
import hashlib
import hmac

from recurrente.core.errors import ConfigurationError

SECRET_PREFIX = "whsec_"
SIGNATURE_VERSION = "v1"


def decode_secret(secret: str) -> bytes:
    """Return the HMAC key for a ``whsec_<base64>`` (or bare base64) secret."""
    if not secret:
        raise ConfigurationError("Missing signing secret")
    if secret.startswith(SECRET_PREFIX):
        secret = secret[len(SECRET_PREFIX):]
    try:
        key = base64.b64decode(secret, validate=True)
    except (binascii.Error, ValueError):
        raise ConfigurationError("Signing secret is not valid base64")
    if not key:
        raise ConfigurationError("Signing secret is empty")
    return key


def compute_signature(key: bytes, msg_id: str, timestamp: str, payload: str) -> str:
    signed = f"{msg_id}.{timestamp}.{payload}".encode("utf-8")
    return base64.b64encode(hmac.new(key, signed, hashlib.sha256).digest()).decode()


def sign_payload(secret: str, msg_id: str, timestamp: int, payload: str) -> str:
    """Build the ``svix-signature`` header value for a delivery."""
    sig = compute_signature(decode_secret(secret), msg_id, str(timestamp), payload)
    return f"{SIGNATURE_VERSION},{sig}"
