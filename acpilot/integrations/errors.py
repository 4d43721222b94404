"""Exceptions raised while decoding collaborator payloads."""

from __future__ import annotations


class PayloadError(Exception):
    """Base exception for unusable vendor or observation payloads."""


class InvalidPayloadError(PayloadError):
    """Raised when a body does not have the expected shape."""


class NoDataError(PayloadError):
    """Raised when a well-formed body carries no usable records."""


__all__ = ["InvalidPayloadError", "NoDataError", "PayloadError"]
