# Signature Verifier
# HMAC-SHA256 check of storefront app proxy query parameters

from .verifier import (
    SIGNATURE_PARAM,
    canonicalize_params,
    compute_signature,
    sign_params,
    verify_signature,
)

__all__ = [
    "SIGNATURE_PARAM",
    "canonicalize_params",
    "compute_signature",
    "sign_params",
    "verify_signature",
]
