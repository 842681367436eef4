"""Enumeration types for credit entities."""

from enum import Enum


class Status(str, Enum):
    """Credit decision state; new credits start IN_PROGRESS."""

    IN_PROGRESS = "IN_PROGRESS"
    APPROVED = "APPROVED"
    REJECT = "REJECT"
