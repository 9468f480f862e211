"""Free-function surface tests mirroring the original PRNG walkthrough."""

import pytest

import xorshift_prng
from xorshift_prng import (
    InvalidRange,
    InvalidState,
    Xorshift32,
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


def test_prng_walkthrough_with_legacy_names():
    prng = initialize_prng(123456)
    assert prng.state == 123456

    assert generate_integer(prng) == 3044438244
    assert generate_min_max_integer(prng, 1, 3) == 2
    assert generate_float(prng) == 0.2612984177010592

    saved_state = save_prng_state(prng)
    assert saved_state == 561134079

    assert generate_integer(prng) == 2951787001
    assert prng.state == 2951787001

    load_prng_state(prng, saved_state)
    assert prng.state == 561134079


def test_prng_walkthrough_with_functional_names():
    prng = initialize(123456)
    assert advance(prng) == 3044438244
    assert next_in_range(prng, 1, 3) == 2
    assert next_float(prng) == 0.2612984177010592
    snapshot = save_state(prng)
    assert advance(prng) == 2951787001
    assert restore_state(prng, snapshot) is prng
    assert prng.state == 561134079


def test_initialize_defaults_to_seed_one():
    prng = initialize()
    assert isinstance(prng, Xorshift32)
    assert prng.state == 1


def test_aliases_match_spec_error_names():
    prng = initialize(0)
    with pytest.raises(InvalidState):
        advance(prng)
    with pytest.raises(InvalidRange):
        next_in_range(initialize(3), 5, 5)


def test_instances_do_not_share_state():
    first = initialize(10)
    second = initialize(10)
    advance(first)
    assert save_state(second) == 10


def test_public_surface_is_exported():
    for name in xorshift_prng.__all__:
        assert hasattr(xorshift_prng, name)
