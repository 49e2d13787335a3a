from __future__ import annotations

from enum import StrEnum


class Resort(StrEnum):
    WDW = "WDW"
    DL = "DL"


class ResponseStatus(StrEnum):
    OK = "OK"
    INVALID_GUEST = "INVALID_GUEST"
    CLOSED_QUEUE = "CLOSED_QUEUE"


class ConflictType(StrEnum):
    NO_PARK_PASS = "NO_PARK_PASS"
    NOT_IN_PARK = "NOT_IN_PARK"
    REDEEM_LIMIT_REACHED = "REDEEM_LIMIT_REACHED"
