from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .availability.factory import AvailabilityStrategyFactory, coerce_version
from .availability.service import AvailabilityService
from .core.constants import DEFAULT_SNAPSHOT_CHUNK_SIZE, DEFAULT_SNAPSHOT_DAYS_BACK, DEFAULT_SNAPSHOT_DAYS_FORWARD
from .core.enums import EngineVersion
from .snapshots.service import SnapshotService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    engine_version: EngineVersion
    snapshot_chunk_size: int

    strategy_factory: AvailabilityStrategyFactory
    availability_service: AvailabilityService
    snapshot_service: SnapshotService


def load_settings() -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def build_container(*, settings: Optional[ModuleType] = None) -> Container:
    settings = settings or load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    engine_version = coerce_version(getattr(settings, "ENGINE_VERSION", EngineVersion.V1_LEGACY.value))
    strategy_factory = AvailabilityStrategyFactory()
    availability_service = AvailabilityService(strategy_factory=strategy_factory, default_version=engine_version)
    snapshot_service = SnapshotService(
        strategy_factory=strategy_factory,
        days_back=int(getattr(settings, "SNAPSHOT_DAYS_BACK", DEFAULT_SNAPSHOT_DAYS_BACK)),
        days_forward=int(getattr(settings, "SNAPSHOT_DAYS_FORWARD", DEFAULT_SNAPSHOT_DAYS_FORWARD)),
    )
    logger.debug("container ready (engine=%s)", engine_version.value)

    return Container(
        engine_version=engine_version,
        snapshot_chunk_size=int(getattr(settings, "SNAPSHOT_CHUNK_SIZE", DEFAULT_SNAPSHOT_CHUNK_SIZE)),
        strategy_factory=strategy_factory,
        availability_service=availability_service,
        snapshot_service=snapshot_service,
    )
