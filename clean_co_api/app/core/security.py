"""
Access tokens and request authorization.

Tokens are compact JSON Web Tokens signed with HMAC‑SHA256.  The payload
is the identity claim supplied by the client when the token was issued
plus an ``exp`` timestamp.  The server keeps no session state: a token
is valid exactly when its signature matches ``settings.secret_key`` and
it has not expired.

Clients carry the token in the ``token`` cookie.  ``get_current_user``
is the FastAPI dependency that gates protected routes, and
``authorize_booking_listing`` restricts the bookings listing to the
owner of the token.
"""

import base64
import hashlib
import hmac
import json
import logging
import time
from typing import Any, Dict, Optional

from fastapi import Cookie, HTTPException, status

from .config import settings

logger = logging.getLogger(__name__)

RESERVED_CLAIMS = frozenset({"exp"})
UNAUTHORIZED_MESSAGE = "unauthorized access"
FORBIDDEN_MESSAGE = "forbidden access"


class Unauthorized(Exception):
    """The request carries no usable credential."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(
    claim: Dict[str, Any],
    expires_delta: Optional[int] = None,
    secret: Optional[str] = None,
) -> str:
    """Sign an identity claim into a token.

    Parameters
    ----------
    claim : dict
        Arbitrary JSON‑serialisable fields, typically at least ``email``.
        The claim is embedded verbatim.
    expires_delta : Optional[int]
        Lifetime in seconds.  Defaults to
        ``settings.access_token_expire_seconds`` (one hour).
    secret : Optional[str]
        Signing secret; defaults to ``settings.secret_key``.

    Returns
    -------
    str
        ``header.payload.signature`` with base64url encoded parts.

    Raises
    ------
    ValueError
        If the claim already contains a reserved field such as ``exp``.
    """
    reserved = RESERVED_CLAIMS.intersection(claim)
    if reserved:
        raise ValueError(f"Reserved claim(s) not allowed: {', '.join(sorted(reserved))}")
    if expires_delta is None:
        expires_delta = settings.access_token_expire_seconds
    to_encode = dict(claim)
    to_encode["exp"] = int(time.time()) + expires_delta
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature = _sign(signing_input, secret or settings.secret_key)
    return f"{header_b64}.{payload_b64}.{_b64_url_encode(signature)}"


def decode_access_token(token: str, secret: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Verify a token and return its full payload, or ``None``.

    The signature is compared in constant time before the payload is
    parsed.  Tokens without ``exp`` or with ``exp`` in the past are
    rejected, as is anything that does not decode to a JSON object.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, secret or settings.secret_key)
    try:
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except ValueError:
        # base64, unicode and JSON decoding errors all derive from ValueError
        return None
    if not isinstance(data, dict):
        return None
    try:
        if int(data["exp"]) <= int(time.time()):
            return None
    except (KeyError, TypeError, ValueError):
        return None
    return data


def verify_token(token: Optional[str], secret: Optional[str] = None) -> Dict[str, Any]:
    """Return the identity claim embedded in ``token``.

    Raises
    ------
    Unauthorized
        ``"missing token"`` when no token was supplied (no signature
        check is attempted), ``"invalid token"`` when the signature,
        expiry or encoding is wrong.
    """
    if not token:
        raise Unauthorized("missing token")
    payload = decode_access_token(token, secret)
    if payload is None:
        raise Unauthorized("invalid token")
    return {key: value for key, value in payload.items() if key not in RESERVED_CLAIMS}


def get_current_user(token: Optional[str] = Cookie(default=None)) -> Dict[str, Any]:
    """Dependency gating routes that need an authenticated caller.

    Reads the ``token`` cookie and returns the decoded identity claim.
    Any failure is answered with HTTP 401 before the route handler runs.
    """
    try:
        return verify_token(token)
    except Unauthorized as exc:
        logger.info("Rejected request: %s", exc.reason)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=UNAUTHORIZED_MESSAGE,
        ) from exc


def authorize_booking_listing(query_email: Optional[str], current_user: Dict[str, Any]) -> Optional[str]:
    """Check that a caller only lists their own bookings.

    The requested e‑mail must equal the ``email`` of the identity claim,
    otherwise HTTP 403 is raised.  When neither side carries an e‑mail
    the check passes and ``None`` is returned, which the booking service
    treats as "no e‑mail filter".

    Returns
    -------
    Optional[str]
        The e‑mail to filter bookings by.
    """
    if query_email != current_user.get("email"):
        logger.info("Forbidden bookings listing for %s", query_email)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN_MESSAGE)
    return query_email
