# Xorshift32 PRNG for deterministic replay (no external deps)
# Shift triple 13/17/5; the middle shift sign-extends like a signed 32-bit int.
import logging
from dataclasses import dataclass

from .errors import InvalidRangeError, InvalidStateError

logger = logging.getLogger(__name__)

MASK32 = 0xFFFFFFFF
SIGN_BIT = 0x80000000
FLOAT_DIVISOR = 0x7FFFFFFF


def _sar17(x: int) -> int:
    # arithmetic shift of x read as signed 32-bit, back in unsigned space
    if x & SIGN_BIT:
        x -= 1 << 32
    return (x >> 17) & MASK32


@dataclass(init=False)
class Xorshift32:
    """Single-state Xorshift32 generator.

    Not thread safe. Give each thread its own instance (see ``fork``) or
    guard a shared one externally.
    """

    state: int

    def __init__(self, seed: int = 1) -> None:
        self.state = int(seed) & MASK32
        if self.state == 0:
            logger.debug("generator seeded with 0; first advance will fail")

    @property
    def is_valid(self) -> bool:
        return self.state != 0

    def advance(self) -> int:
        """Apply one xorshift step and return the new state."""
        x = self.state
        if x == 0:
            logger.debug("refusing to advance from zero state")
            raise InvalidStateError(
                "State cannot be zero. Use a valid seed or restore a saved state."
            )
        x = (x ^ (x << 13)) & MASK32
        x ^= _sar17(x)
        x = (x ^ (x << 5)) & MASK32
        self.state = x
        return x

    next = advance

    def next_in_range(self, minimum: int, maximum: int) -> int:
        """Integer in [minimum, maximum); plain modulo, so slightly biased."""
        if maximum <= minimum:
            logger.debug("rejecting range [%s, %s)", minimum, maximum)
            raise InvalidRangeError(
                f"Max must be greater than min in next_in_range (got {minimum}, {maximum})"
            )
        return minimum + self.advance() % (maximum - minimum)

    def next_float(self) -> float:
        """Float in [0, 1]; 1.0 comes back when the low 31 bits are all set.

        Scales the low 31 bits by 0x7FFFFFFF rather than the full value by
        0xFFFFFFFF, so results are not those of a ``value / 0xFFFFFFFF``
        port (seed 1 gives about 1.259e-4, not 6.295e-5).
        """
        return (self.advance() & FLOAT_DIVISOR) / FLOAT_DIVISOR

    def save_state(self) -> int:
        return self.state

    def restore_state(self, value: int) -> "Xorshift32":
        # no zero check here; an invalid snapshot fails on the next advance
        self.state = int(value) & MASK32
        logger.debug("restored state %d", self.state)
        return self

    def fork(self) -> "Xorshift32":
        """Independent copy positioned at the same point of the stream."""
        return type(self)(self.state)
