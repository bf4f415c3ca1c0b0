"""Signing key models."""

from .base import QStashModel


class SigningKeys(QStashModel):
    """The current and next keys used to sign webhook deliveries."""

    current: str
    next: str
