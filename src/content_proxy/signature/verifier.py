"""Shopify app proxy signature verification.

The storefront signs every proxied request with HMAC-SHA256 over its query
parameters. The canonical message is built by dropping the ``signature``
parameter, sorting the remaining pairs by key and joining them as
``key=value`` with ``&``.
"""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Iterable, Mapping
from typing import Union

SIGNATURE_PARAM = "signature"

QueryParams = Union[Mapping[str, str], Iterable[tuple[str, str]]]


def _pairs(params: QueryParams) -> list[tuple[str, str]]:
    if isinstance(params, Mapping):
        return [(str(k), str(v)) for k, v in params.items()]
    return [(str(k), str(v)) for k, v in params]


def canonicalize_params(params: QueryParams) -> str:
    """Build the message that gets signed.

    Repeated keys stay as separate pairs, in their original relative order.
    """
    pairs = [(k, v) for k, v in _pairs(params) if k != SIGNATURE_PARAM]
    pairs.sort(key=lambda pair: pair[0])
    return "&".join(f"{k}={v}" for k, v in pairs)


def compute_signature(params: QueryParams, secret: str) -> str:
    """Hex HMAC-SHA256 digest of the canonical parameters."""
    return hmac.new(
        secret.encode("utf-8"),
        canonicalize_params(params).encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def verify_signature(params: QueryParams, secret: str) -> bool:
    """Check the ``signature`` parameter against the recomputed digest.

    Returns False when the signature is missing or empty; never raises.
    """
    pairs = _pairs(params)
    signature = next((v for k, v in pairs if k == SIGNATURE_PARAM), "")
    if not signature:
        return False
    expected = compute_signature(pairs, secret)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))


def sign_params(params: QueryParams, secret: str) -> dict[str, str]:
    """Return a copy of ``params`` carrying a valid signature."""
    signed = {k: v for k, v in _pairs(params) if k != SIGNATURE_PARAM}
    signed[SIGNATURE_PARAM] = compute_signature(signed, secret)
    return signed
