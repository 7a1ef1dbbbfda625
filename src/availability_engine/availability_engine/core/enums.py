from __future__ import annotations

from enum import Enum


class EngineVersion(str, Enum):
    """Per-organization selector among the resolution algorithms."""

    V1_LEGACY = "v1_legacy"
    V2_WRITE_BASED = "v2_write_based"
    V2_SIMPLIFIED = "v2_simplified"


class AvailabilityStatus(str, Enum):
    """Status vocabulary of a resolved slot."""

    FULL = "full"
    BASE = "base"
    ARRIVAL = "arrival"
    DEPARTURE = "departure"
    HOME = "home"
    UNAVAILABLE = "unavailable"
    NOT_DEFINED = "not_defined"


class SlotSource(str, Enum):
    MANUAL = "manual"
    ABSENCE = "absence"
    ROTATION = "rotation"
    DEFAULT = "default"
    SYSTEM = "system"


class ApprovalStatus(str, Enum):
    """Approval workflow state of an absence request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    PARTIALLY_APPROVED = "partially_approved"
    CONFLICT = "conflict"


class BlockType(str, Enum):
    ABSENCE = "absence"
    HOURLY_BLOCKAGE = "hourly_blockage"


class ExplicitState(str, Enum):
    BASE = "base"
    HOME = "home"


class SubState(str, Enum):
    FULL_DAY = "full_day"
    ARRIVAL = "arrival"
    DEPARTURE = "departure"
    SINGLE_DAY = "single_day"
    VACATION = "vacation"
    GIMEL = "gimel"
    ABSENT = "absent"
    ORG_DAYS = "org_days"
    NOT_IN_SHAMP = "not_in_shamp"
    NOT_DEFINED = "not_defined"


class RotationCategory(str, Enum):
    """Cycle-relative day category of a team rotation."""

    ARRIVAL = "arrival"
    FULL = "full"
    DEPARTURE = "departure"
    HOME = "home"


class DisplayStatus(str, Enum):
    """UI-facing classification of an attendance cell."""

    BASE = "base"
    HOME = "home"
    ARRIVAL = "arrival"
    DEPARTURE = "departure"
    MISSING_ARRIVAL = "missing_arrival"
    MISSING_DEPARTURE = "missing_departure"
    SINGLE_DAY = "single_day"
    UNAVAILABLE = "unavailable"
    NOT_DEFINED = "not_defined"
    UNKNOWN = "unknown"
