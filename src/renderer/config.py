# renderer/config.py
import math
import os
from dataclasses import dataclass, fields, replace
from typing import Optional

from renderer.shading import MAX_DEPTH


@dataclass(frozen=True)
class RenderSettings:
    """
    Everything that controls a render apart from the scene itself.

    shadow_samples and jitter, when set, override the sample grid and jitter
    flag of every area light for this render only. divide_threshold, when
    set, subdivides large groups before dispatch.
    """
    width: int = 400
    height: int = 200
    field_of_view: float = math.pi / 3
    max_depth: int = MAX_DEPTH
    antialias: int = 1
    workers: int = 1
    rows_per_task: int = 8
    shadow_samples: Optional[int] = None
    jitter: Optional[bool] = None
    divide_threshold: Optional[int] = None

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if not 0.0 < self.field_of_view < math.pi:
            raise ValueError(f"field_of_view must be within (0, pi), got {self.field_of_view}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if self.antialias < 1:
            raise ValueError(f"antialias must be at least 1, got {self.antialias}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.rows_per_task < 1:
            raise ValueError(f"rows_per_task must be at least 1, got {self.rows_per_task}")
        if self.shadow_samples is not None and self.shadow_samples < 1:
            raise ValueError(f"shadow_samples must be at least 1, got {self.shadow_samples}")
        if self.divide_threshold is not None and self.divide_threshold < 2:
            raise ValueError(f"divide_threshold must be at least 2, got {self.divide_threshold}")

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        try:
            preset = QUALITY_LEVELS[name]
        except KeyError:
            raise ValueError(f"Unknown quality level {name!r}; "
                             f"choose from {', '.join(QUALITY_LEVELS)}") from None
        known = {f.name for f in fields(cls)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"Unknown render settings: {', '.join(sorted(unknown))}")
        return replace(preset, **overrides)

    def with_changes(self, **changes) -> "RenderSettings":
        return replace(self, **changes)


def default_workers() -> int:
    return max(1, os.cpu_count() or 1)


QUALITY_LEVELS = {
    "draft": RenderSettings(width=200, height=100, max_depth=2, antialias=1,
                            shadow_samples=1, jitter=False),
    "balanced": RenderSettings(width=400, height=200, max_depth=4, antialias=2,
                               shadow_samples=4),
    "high_quality": RenderSettings(width=800, height=400, max_depth=6, antialias=3,
                                   shadow_samples=8, divide_threshold=8),
}
