"""
Units: Time and data-size value types for resource configuration.

Resource properties are rendered in a fixed unit (seconds, mebibytes), so
callers express intent with a named unit and convert at synthesis time.
"""

from dataclasses import dataclass


def _as_whole(amount: float, unit: str) -> int:
    if amount != int(amount):
        raise ValueError(f"'{amount}' cannot be converted into a whole number of {unit}")
    return int(amount)


@dataclass(frozen=True)
class Duration:
    """
    A length of time.

    Example:
        timeout = Duration.minutes(15)
        timeout.to_seconds()  # 900
    """

    amount_seconds: float
    """Length of the duration in seconds"""

    @classmethod
    def seconds(cls, amount: float) -> 'Duration':
        return cls(amount)

    @classmethod
    def minutes(cls, amount: float) -> 'Duration':
        return cls(amount * 60)

    @classmethod
    def hours(cls, amount: float) -> 'Duration':
        return cls(amount * 3600)

    def to_seconds(self) -> int:
        """Return the duration in whole seconds."""
        return _as_whole(self.amount_seconds, "seconds")

    def __repr__(self):
        return f"Duration({self.amount_seconds}s)"


@dataclass(frozen=True)
class Size:
    """
    An amount of data.

    Example:
        memory = Size.mebibytes(128)
        memory.to_mebibytes()  # 128
    """

    amount_kibibytes: float
    """Amount of data in KiB"""

    @classmethod
    def kibibytes(cls, amount: float) -> 'Size':
        return cls(amount)

    @classmethod
    def mebibytes(cls, amount: float) -> 'Size':
        return cls(amount * 1024)

    @classmethod
    def gibibytes(cls, amount: float) -> 'Size':
        return cls(amount * 1024 * 1024)

    def to_mebibytes(self) -> int:
        """Return the size in whole MiB."""
        return _as_whole(self.amount_kibibytes / 1024, "mebibytes")

    def __repr__(self):
        return f"Size({self.amount_kibibytes}KiB)"
