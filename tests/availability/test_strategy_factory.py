from availability_engine.availability.factory import AvailabilityStrategyFactory, coerce_version, create_strategy
from availability_engine.availability.strategies.explicit_state_strategy import ExplicitStateStrategy
from availability_engine.availability.strategies.legacy_strategy import LegacyPropagationStrategy
from availability_engine.availability.strategies.write_based_strategy import WriteBasedStrategy
from availability_engine.core.enums import EngineVersion


def test_factory_maps_each_engine_version():
    factory = AvailabilityStrategyFactory()

    assert isinstance(factory.for_version(EngineVersion.V1_LEGACY), LegacyPropagationStrategy)
    assert isinstance(factory.for_version(EngineVersion.V2_WRITE_BASED), WriteBasedStrategy)
    assert isinstance(factory.for_version(EngineVersion.V2_SIMPLIFIED), ExplicitStateStrategy)


def test_factory_accepts_stored_strings():
    assert isinstance(create_strategy("v2_write_based"), WriteBasedStrategy)
    assert isinstance(create_strategy(" V2_SIMPLIFIED "), ExplicitStateStrategy)


def test_unknown_version_falls_back_to_legacy():
    assert coerce_version("v9_future") == EngineVersion.V1_LEGACY
    assert coerce_version(None) == EngineVersion.V1_LEGACY
    assert isinstance(create_strategy("v9_future"), LegacyPropagationStrategy)
