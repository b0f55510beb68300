"""Generator error types: dual struct+exception for serialized and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidCount',
    'InvalidCountError',
    'InvalidRange',
    'InvalidRangeError',
    'InvalidSeed',
    'InvalidSeedError',
    'InvalidState',
    'InvalidStateError',
    'NotSeeded',
    'NotSeededError',
]


# --- Sampling Errors ---


class InvalidRange(msgspec.Struct, frozen=True, gc=False):
    """Inclusive range cannot be sampled - struct variant."""

    lower: int
    upper: int
    reason: str | None = None

    def to_exception(self) -> InvalidRangeError:
        """Convert to exception for raise-based code."""
        return InvalidRangeError(self.lower, self.upper, self.reason)


class InvalidRangeError(ValueError):
    """Inclusive range cannot be sampled - exception variant."""

    def __init__(self, lower: int, upper: int, reason: str | None = None) -> None:
        self.lower = lower
        self.upper = upper
        self.reason = reason
        super().__init__(reason or f'Lower bound exceeds upper bound ({lower} > {upper})')

    def to_struct(self) -> InvalidRange:
        """Convert to struct for serialization."""
        return InvalidRange(self.lower, self.upper, self.reason)


class InvalidCount(msgspec.Struct, frozen=True, gc=False):
    """Index count is negative - struct variant."""

    count: int

    def to_exception(self) -> InvalidCountError:
        """Convert to exception for raise-based code."""
        return InvalidCountError(self.count)


class InvalidCountError(ValueError):
    """Index count is negative - exception variant."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f'Count must not be negative, got {count}')

    def to_struct(self) -> InvalidCount:
        """Convert to struct for serialization."""
        return InvalidCount(self.count)


# --- Lifecycle Errors ---


class NotSeeded(msgspec.Struct, frozen=True, gc=False):
    """Generator used before seeding - struct variant."""

    algorithm: str | None = None

    def to_exception(self) -> NotSeededError:
        """Convert to exception for raise-based code."""
        return NotSeededError(self.algorithm)


class NotSeededError(RuntimeError):
    """Generator used before seeding - exception variant."""

    def __init__(self, algorithm: str | None = None) -> None:
        self.algorithm = algorithm
        msg = 'Generator not initialized'
        if algorithm:
            msg = f"Generator '{algorithm}' not initialized"
        super().__init__(f'{msg}; call seed() first')

    def to_struct(self) -> NotSeeded:
        """Convert to struct for serialization."""
        return NotSeeded(self.algorithm)


class InvalidSeed(msgspec.Struct, frozen=True, gc=False):
    """Seed cannot be read as 32-bit words - struct variant."""

    reason: str

    def to_exception(self) -> InvalidSeedError:
        """Convert to exception for raise-based code."""
        return InvalidSeedError(self.reason)


class InvalidSeedError(ValueError):
    """Seed cannot be read as 32-bit words - exception variant."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f'Invalid seed: {reason}')

    def to_struct(self) -> InvalidSeed:
        """Convert to struct for serialization."""
        return InvalidSeed(self.reason)


# --- Snapshot Errors ---


class InvalidState(msgspec.Struct, frozen=True, gc=False):
    """Snapshot does not describe a valid generator state - struct variant."""

    reason: str
    algorithm: str | None = None

    def to_exception(self) -> InvalidStateError:
        """Convert to exception for raise-based code."""
        return InvalidStateError(self.reason, self.algorithm)


class InvalidStateError(ValueError):
    """Snapshot does not describe a valid generator state - exception variant."""

    def __init__(self, reason: str, algorithm: str | None = None) -> None:
        self.reason = reason
        self.algorithm = algorithm
        msg = f'Invalid generator state: {reason}'
        if algorithm:
            msg = f'[{algorithm}] {msg}'
        super().__init__(msg)

    def to_struct(self) -> InvalidState:
        """Convert to struct for serialization."""
        return InvalidState(self.reason, self.algorithm)
