from dataclasses import dataclass
from typing import Optional, Union

@dataclass
class DrawRecord:
    index: int
    kind: str
    value: Union[int, float]
    state: int

@dataclass
class Checkpoint:
    after_draw: int
    state: int
    replay_matches: Optional[bool] = None
