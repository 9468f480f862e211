"""Seeded draw session with checkpoint and replay for Xorshift32 streams."""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from .errors import ConfigError, InvalidRangeError
from .models import Checkpoint, DrawRecord
from .prng import Xorshift32

logger = logging.getLogger(__name__)

DRAW_KINDS = ("integer", "range", "float")


@dataclass
class DrawConfig:
    """Configuration for a deterministic draw session."""

    seed: int = 1
    draws: int = 10
    range_min: int = 0
    range_max: int = 100  # exclusive
    checkpoint_at: Optional[int] = None  # 1-based draw index
    kinds: tuple[str, ...] = DRAW_KINDS

    def validate(self) -> None:
        if self.draws <= 0:
            raise ConfigError(f"draws must be positive, received {self.draws}")
        if not self.kinds:
            raise ConfigError("at least one draw kind is required")
        unknown = [kind for kind in self.kinds if kind not in DRAW_KINDS]
        if unknown:
            raise ConfigError(
                f"unknown draw kind(s) {', '.join(unknown)}; expected one of {', '.join(DRAW_KINDS)}"
            )
        if "range" in self.kinds and self.range_max <= self.range_min:
            raise InvalidRangeError(
                f"range_max ({self.range_max}) must be greater than range_min ({self.range_min})"
            )
        if self.checkpoint_at is not None and not 1 <= self.checkpoint_at <= self.draws:
            raise ConfigError(
                f"checkpoint_at must fall within 1..{self.draws}, received {self.checkpoint_at}"
            )


def _draw(rng: Xorshift32, kind: str, cfg: DrawConfig):
    if kind == "range":
        return rng.next_in_range(cfg.range_min, cfg.range_max)
    if kind == "float":
        return rng.next_float()
    return rng.advance()


def _run_draws(rng: Xorshift32, cfg: DrawConfig, start: int, stop: int) -> List[DrawRecord]:
    records: List[DrawRecord] = []
    for index in range(start, stop + 1):
        kind = cfg.kinds[(index - 1) % len(cfg.kinds)]
        value = _draw(rng, kind, cfg)
        records.append(DrawRecord(index=index, kind=kind, value=value, state=rng.save_state()))
    return records


def run_draw_session(cfg: DrawConfig) -> Dict[str, Any]:
    """Run the configured draws, fully driven by the seed."""

    cfg.validate()
    rng = Xorshift32(cfg.seed)

    checkpoint: Optional[Checkpoint] = None
    if cfg.checkpoint_at is None:
        log = _run_draws(rng, cfg, 1, cfg.draws)
    else:
        head = _run_draws(rng, cfg, 1, cfg.checkpoint_at)
        checkpoint = Checkpoint(after_draw=cfg.checkpoint_at, state=rng.save_state())
        logger.debug("checkpoint after draw %d at state %d", checkpoint.after_draw, checkpoint.state)
        tail = _run_draws(rng, cfg, cfg.checkpoint_at + 1, cfg.draws)

        # Replay the tail from the snapshot on a fresh generator.
        replay = Xorshift32().restore_state(checkpoint.state)
        checkpoint.replay_matches = _run_draws(replay, cfg, cfg.checkpoint_at + 1, cfg.draws) == tail
        if not checkpoint.replay_matches:
            logger.warning("replay from checkpoint state %d diverged", checkpoint.state)
        log = head + tail

    return {
        "config": asdict(cfg),
        "final": {
            "state": rng.save_state(),
            "draws": len(log),
        },
        "checkpoint": asdict(checkpoint) if checkpoint is not None else None,
        "log": [asdict(entry) for entry in log],
    }
