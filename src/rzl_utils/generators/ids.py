"""UUID and ULID generators."""

import secrets
import threading
import time
import uuid
from typing import Literal

import ulid
from ulid import monotonic as ulid_monotonic

from ..errors import RangeError
from ..kinds import Kind, get_kind, get_precise_type

# pylint: disable=too-few-public-methods

type UUIDVersion = Literal["v4", "v7"]

UUID_VERSIONS = ("v4", "v7")
RAND_BITS = 74  # pragma: no mutate
_RAND_LIMIT = 1 << RAND_BITS


def _build_uuid7(timestamp_ms: int, rand: int) -> uuid.UUID:
    """Pack a 48-bit timestamp and 74 random bits into an RFC 9562 UUIDv7."""
    rand_a = rand >> 62
    rand_b = rand & ((1 << 62) - 1)
    value = (timestamp_ms & ((1 << 48) - 1)) << 80
    value |= 0x7 << 76
    value |= rand_a << 64
    value |= 0b10 << 62
    value |= rand_b
    return uuid.UUID(int=value)


class UUIDv7Generator:
    """UUIDv7 generator.

    UUIDv7 carry a millisecond timestamp followed by random bits, so they
    sort by creation time. With ``monotonic`` the random bits are
    incremented (instead of redrawn) when the clock has not advanced since
    the previous call, which keeps identifiers strictly increasing within a
    millisecond. When those bits overflow, the timestamp is carried forward
    by one millisecond.
    """

    def __init__(self, clock=time.time_ns) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._last_ms = -1
        self._last_rand = 0

    def _now_ms(self) -> int:
        return self._clock() // 1_000_000

    def new_id(self, *, monotonic: bool = False) -> str:
        """Generate a new UUIDv7 (serialized across threads when monotonic)."""
        if not monotonic:
            return str(_build_uuid7(self._now_ms(), secrets.randbits(RAND_BITS)))
        with self._lock:
            now_ms = self._now_ms()
            if now_ms <= self._last_ms:
                rand = self._last_rand + 1
                if rand >= _RAND_LIMIT:
                    now_ms, rand = self._last_ms + 1, secrets.randbits(RAND_BITS - 1)
                else:
                    now_ms = self._last_ms
            else:
                # top random bit starts clear so increments have room
                rand = secrets.randbits(RAND_BITS - 1)
            self._last_ms, self._last_rand = now_ms, rand
            return str(_build_uuid7(now_ms, rand))


class ULIDGenerator:
    """Thread-safe ULID generator.

    ULIDs are unique, lexicographically sortable identifiers made of a
    timestamp and a random component. This generator uses the `ulid-py`
    library; its monotonic provider increments the random component within
    the same millisecond.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self, *, monotonic: bool = False) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(ulid_monotonic.new() if monotonic else ulid.new())


_uuid7_generator = UUIDv7Generator()
_ulid_generator = ULIDGenerator()


def random_uuid(*, version: UUIDVersion = "v4", monotonic: bool = False) -> str:
    """Return a random RFC 9562 UUID string.

    Args:
        version: ``"v4"`` (fully random) or ``"v7"`` (time ordered).
        monotonic: Make successive v7 identifiers strictly increasing.

    Returns:
        str: The canonical 36-character form.

    Raises:
        TypeError: If ``version`` is not a non-empty string, ``monotonic`` is
            not a boolean, or ``monotonic`` is requested for v4.
        RangeError: If ``version`` is not ``"v4"`` or ``"v7"``.

    Examples:
        >>> random_uuid()[14]
        '4'
        >>> random_uuid(version="v7", monotonic=True)[14]
        '7'
    """
    if get_kind(version) is not Kind.STRING or not version.strip():
        raise TypeError(
            'Parameter `version` must be a `string` of either "v4" or "v7", '
            f"but received: `{get_precise_type(version)}`."
        )
    if version not in UUID_VERSIONS:
        raise RangeError(
            f'Unsupported UUID version {version!r}, allowed values are "v4" or "v7".'
        )
    if get_kind(monotonic) is not Kind.BOOLEAN:
        raise TypeError(
            "Parameter `monotonic` must be of type `boolean`, "
            f"but received: `{get_precise_type(monotonic)}`."
        )
    if monotonic and version != "v7":
        raise TypeError('Parameter `monotonic` is only supported for version "v7".')
    if version == "v4":
        return str(uuid.uuid4())
    return _uuid7_generator.new_id(monotonic=monotonic)


def random_ulid(*, monotonic: bool = False) -> str:
    """Return a new 26-character ULID string.

    Raises:
        TypeError: If ``monotonic`` is not a boolean.
    """
    if get_kind(monotonic) is not Kind.BOOLEAN:
        raise TypeError(
            "Parameter `monotonic` must be of type `boolean`, "
            f"but received: `{get_precise_type(monotonic)}`."
        )
    return _ulid_generator.new_id(monotonic=monotonic)
