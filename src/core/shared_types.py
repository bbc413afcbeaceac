"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    WON = "won"
    # NOTE no DRAW: a full board without a winner still shows whose turn it is


class Mark(StrEnum):
    X = "X"
    O = "O"
