"""Public package surface for the Xorshift32 deterministic PRNG."""

from .api import (
    advance,
    generate_float,
    generate_integer,
    generate_min_max_integer,
    initialize,
    initialize_prng,
    load_prng_state,
    next_float,
    next_in_range,
    restore_state,
    save_prng_state,
    save_state,
)
from .errors import (
    ConfigError,
    InvalidRange,
    InvalidRangeError,
    InvalidState,
    InvalidStateError,
    PRNGError,
)
from .prng import Xorshift32
from .session import DrawConfig, run_draw_session

__all__ = [
    "ConfigError",
    "DrawConfig",
    "InvalidRange",
    "InvalidRangeError",
    "InvalidState",
    "InvalidStateError",
    "PRNGError",
    "Xorshift32",
    "advance",
    "generate_float",
    "generate_integer",
    "generate_min_max_integer",
    "initialize",
    "initialize_prng",
    "load_prng_state",
    "next_float",
    "next_in_range",
    "restore_state",
    "run_draw_session",
    "save_prng_state",
    "save_state",
]
