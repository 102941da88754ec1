"""Account domain exceptions."""

from __future__ import annotations


class UserNotFound(Exception):
    """The referenced user does not exist."""


class InactiveUser(Exception):
    """The user account is deactivated and cannot place orders."""
