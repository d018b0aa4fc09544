"""Unit tests for rzl_utils.generators.ids."""

import concurrent.futures as cf
import uuid

import pytest
import ulid

from rzl_utils.errors import RangeError
from rzl_utils.generators.ids import (
    RAND_BITS,
    ULIDGenerator,
    UUIDv7Generator,
    random_ulid,
    random_uuid,
)

# pylint: disable=magic-value-comparison, protected-access

FIXED_MS = 1_700_000_000_000


class FakeClock:
    """Nanosecond clock that only moves when told to."""

    def __init__(self, ms: int = FIXED_MS) -> None:
        self.ms = ms

    def __call__(self) -> int:
        return self.ms * 1_000_000


def _timestamp_ms(value: str) -> int:
    return uuid.UUID(value).int >> 80


class TestRandomUUID:
    """Public UUID helper."""

    def test_v4(self):
        parsed = uuid.UUID(random_uuid())
        assert parsed.version == 4
        assert parsed.variant == uuid.RFC_4122

    @pytest.mark.parametrize("monotonic", [False, True])
    def test_v7(self, monotonic):
        value = random_uuid(version="v7", monotonic=monotonic)
        parsed = uuid.UUID(value)
        assert parsed.version == 7
        assert parsed.variant == uuid.RFC_4122
        assert str(parsed) == value

    def test_unsupported_version(self):
        with pytest.raises(RangeError, match="v5"):
            random_uuid(version="v5")  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"version": 4},
            {"version": "  "},
            {"version": "v7", "monotonic": "yes"},
            {"version": "v4", "monotonic": True},
        ],
    )
    def test_invalid_arguments(self, kwargs):
        with pytest.raises(TypeError):
            random_uuid(**kwargs)


class TestUUIDv7Generator:
    """Time-ordered identifiers."""

    def test_embeds_the_clock(self):
        gen = UUIDv7Generator(clock=FakeClock())
        assert _timestamp_ms(gen.new_id()) == FIXED_MS
        assert _timestamp_ms(gen.new_id(monotonic=True)) == FIXED_MS

    def test_monotonic_within_one_millisecond(self):
        gen = UUIDv7Generator(clock=FakeClock())
        ids = [gen.new_id(monotonic=True) for _ in range(1_000)]
        assert ids == sorted(ids)
        assert len(set(ids)) == len(ids)
        assert {_timestamp_ms(i) for i in ids} == {FIXED_MS}

    def test_monotonic_when_clock_goes_back(self):
        clock = FakeClock()
        gen = UUIDv7Generator(clock=clock)
        first = gen.new_id(monotonic=True)
        clock.ms -= 5
        second = gen.new_id(monotonic=True)
        assert second > first
        assert _timestamp_ms(second) == FIXED_MS

    def test_overflow_carries_into_timestamp(self):
        gen = UUIDv7Generator(clock=FakeClock())
        gen.new_id(monotonic=True)
        gen._last_rand = (1 << RAND_BITS) - 1
        assert _timestamp_ms(gen.new_id(monotonic=True)) == FIXED_MS + 1

    def test_monotonic_under_threads(self):
        gen = UUIDv7Generator()
        with cf.ThreadPoolExecutor(max_workers=8) as ex:
            ids = list(ex.map(lambda _: gen.new_id(monotonic=True), range(2_000)))
        assert len(set(ids)) == len(ids)


class TestULID:
    """ULIDs from ulid-py."""

    def test_ulid_has_len_26(self):
        value = random_ulid()
        assert len(value) == 26
        assert str(ulid.parse(value)) == value

    def test_monotonic_order(self):
        ids = [ULIDGenerator().new_id(monotonic=True) for _ in range(2_000)]
        assert ids == sorted(ids)

    def test_monotonic_must_be_boolean(self):
        with pytest.raises(TypeError, match="monotonic"):
            random_ulid(monotonic=1)  # type: ignore[arg-type]
