import pytest

from expirycache.model import (
    DEFAULT_GC_INTERVAL,
    DEFAULT_ITEM_TTL,
    CacheError,
    InvalidConfigError,
    Options,
)


@pytest.mark.parametrize(
    "options, expected_ttl, expected_interval",
    [
        (Options(item_ttl=120.0, gc_interval=30.0), 120.0, 30.0),
        (Options(item_ttl=0, gc_interval=0), DEFAULT_ITEM_TTL, DEFAULT_GC_INTERVAL),
    ],
    ids=["valid values", "zero values should backfill"],
)
def test_valid_options(options, expected_ttl, expected_interval):
    options.validate()
    assert options.item_ttl == expected_ttl
    assert options.gc_interval == expected_interval


def test_default_constructed_options_match_defaults():
    options = Options()
    options.validate()
    assert options == Options(item_ttl=DEFAULT_ITEM_TTL, gc_interval=DEFAULT_GC_INTERVAL)


def test_backfilled_defaults_are_two_minutes_and_thirty_seconds():
    options = Options(item_ttl=0, gc_interval=0)
    options.validate()
    assert options.item_ttl == 120.0
    assert options.gc_interval == 30.0


def test_only_zero_field_is_backfilled():
    options = Options(item_ttl=5.0, gc_interval=0)
    options.validate()
    assert options.item_ttl == 5.0
    assert options.gc_interval == DEFAULT_GC_INTERVAL


@pytest.mark.parametrize(
    "options",
    [
        Options(item_ttl=-1.0, gc_interval=10.0),
        Options(item_ttl=10.0, gc_interval=-5.0),
    ],
    ids=["negative ItemTTL", "negative GCInterval"],
)
def test_bad_options(options):
    with pytest.raises(InvalidConfigError, match="invalid config value"):
        options.validate()


@pytest.mark.parametrize("base", [CacheError, ValueError])
def test_invalid_config_caught_as_base_errors(base):
    options = Options(item_ttl=-1.0, gc_interval=10.0)
    with pytest.raises(base) as excinfo:
        options.validate()
    assert isinstance(excinfo.value, InvalidConfigError)