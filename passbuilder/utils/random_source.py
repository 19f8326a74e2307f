"""
Cryptographically secure random number source.
"""

import logging
import secrets
from typing import List, MutableSequence, Sequence, TypeVar

from ..exceptions import BuilderDisposedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SecureRandom:
    """Random integer handle backed by the operating system CSPRNG."""

    # Bytes drawn per integer
    INT_SIZE = 4

    def __init__(self):
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise BuilderDisposedError("Random source has been closed")

    def next_int(self, x: int, y: int) -> int:
        """
        Return a random integer in the inclusive range between x and y.

        The bounds may be passed in either order.

        Args:
            x: One bound of the range
            y: The other bound of the range

        Returns:
            Integer value within [min(x, y), max(x, y)]
        """
        self._ensure_open()

        if x == y:
            return x

        base = min(x, y)
        span = max(x, y) - base + 1
        value = int.from_bytes(secrets.token_bytes(self.INT_SIZE), "little")
        return base + value % span

    def below(self, n: int) -> int:
        """Return a random integer in [0, n)."""
        if n <= 0:
            raise ValueError("Upper bound must be positive")
        return self.next_int(0, n - 1)

    def choice(self, seq: Sequence[T]) -> T:
        """Return a random element of a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.below(len(seq))]

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle a sequence in place (Fisher-Yates)."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(0, i)
            items[i], items[j] = items[j], items[i]

    def sample(self, population: Sequence[T], count: int) -> List[T]:
        """Draw count elements with replacement."""
        return [self.choice(population) for _ in range(count)]

    def close(self) -> None:
        """Release the handle; further draws fail."""
        if not self._closed:
            self._closed = True
            logger.debug("Secure random source closed")

    def __enter__(self) -> "SecureRandom":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
