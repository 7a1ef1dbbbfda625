from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from ..core.enums import EngineVersion
from .strategies.base import AvailabilityStrategy
from .strategies.explicit_state_strategy import ExplicitStateStrategy
from .strategies.legacy_strategy import LegacyPropagationStrategy
from .strategies.write_based_strategy import WriteBasedStrategy

logger = logging.getLogger(__name__)


def coerce_version(version: Union[EngineVersion, str, None]) -> EngineVersion:
    """Map a stored engine_version setting to the enum; unknown means legacy."""
    if isinstance(version, EngineVersion):
        return version
    try:
        return EngineVersion(str(version).strip().lower())
    except ValueError:
        if version is not None:
            logger.warning("unknown engine version %r, falling back to %s", version, EngineVersion.V1_LEGACY.value)
        return EngineVersion.V1_LEGACY


@dataclass
class AvailabilityStrategyFactory:
    """Factory Pattern: choose the resolution engine for an organization."""

    def for_version(self, version: Union[EngineVersion, str, None]) -> AvailabilityStrategy:
        selected = coerce_version(version)
        if selected == EngineVersion.V2_WRITE_BASED:
            return WriteBasedStrategy()
        if selected == EngineVersion.V2_SIMPLIFIED:
            return ExplicitStateStrategy()
        return LegacyPropagationStrategy()


def create_strategy(version: Union[EngineVersion, str, None]) -> AvailabilityStrategy:
    return AvailabilityStrategyFactory().for_version(version)
