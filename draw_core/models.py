# draw_core/models.py
from __future__ import annotations
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from .constants import (
    SPIN_TICKS, SPIN_INTERVAL_MS, DEFAULT_GROUP_SIZE,
    SHUFFLE_FISHER_YATES, STATUS_IDLE, STATUS_DRAWING, STATUS_WON,
)


class AppConfig(BaseModel):
    spin_ticks: int = SPIN_TICKS
    spin_interval_ms: int = SPIN_INTERVAL_MS
    default_group_size: int = DEFAULT_GROUP_SIZE
    allow_repeat: bool = False
    shuffle_strategy: Literal["fisher_yates", "comparator"] = SHUFFLE_FISHER_YATES
    random_seed: Optional[int] = None
    celebrate: bool = True

    @field_validator("spin_ticks", "default_group_size")
    @classmethod
    def _at_least_one(cls, v):
        if v < 1:
            raise ValueError("must be >= 1")
        return v

    @field_validator("spin_interval_ms")
    @classmethod
    def _non_negative(cls, v):
        if v < 0:
            raise ValueError("must be >= 0")
        return v


class WinnerState(BaseModel):
    status: Literal["idle", "drawing", "won"] = STATUS_IDLE
    candidate: str = ""              # flickering name while drawing, never committed
    winner: Optional[str] = None     # last committed winner

    @classmethod
    def idle(cls) -> "WinnerState":
        return cls()

    @classmethod
    def drawing(cls, candidate: str = "") -> "WinnerState":
        return cls(status=STATUS_DRAWING, candidate=candidate)

    @classmethod
    def won(cls, winner: str) -> "WinnerState":
        return cls(status=STATUS_WON, winner=winner)


class GroupPartition(BaseModel):
    group_size: int = 1
    groups: List[List[str]] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.groups)

    def sizes(self) -> List[int]:
        return [len(g) for g in self.groups]

    def members(self) -> List[str]:
        return [name for g in self.groups for name in g]
