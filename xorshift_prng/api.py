"""Free-function surface over :class:`Xorshift32`.

Each helper forwards to the matching generator method. The ``*_prng`` and
``generate_*`` names are kept for callers written against the older API.
"""

from .prng import Xorshift32


def initialize(seed: int = 1) -> Xorshift32:
    return Xorshift32(seed)


def advance(prng: Xorshift32) -> int:
    return prng.advance()


def next_in_range(prng: Xorshift32, minimum: int, maximum: int) -> int:
    return prng.next_in_range(minimum, maximum)


def next_float(prng: Xorshift32) -> float:
    return prng.next_float()


def save_state(prng: Xorshift32) -> int:
    return prng.save_state()


def restore_state(prng: Xorshift32, value: int) -> Xorshift32:
    return prng.restore_state(value)


initialize_prng = initialize
generate_integer = advance
generate_min_max_integer = next_in_range
generate_float = next_float
save_prng_state = save_state
load_prng_state = restore_state
