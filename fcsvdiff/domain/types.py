from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import List, Optional, Tuple

from ..shared.constants import DIFF_BASELINE, RATIO_BASELINE


class Alignment(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def parse(cls, s: str) -> "Alignment":
        try:
            return cls(s.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid alignment: {s}. Must be left, right, or center") from None


class OutputMode(Enum):
    COMPACT = auto()
    EXPLAIN = auto()
    ALIGNED = auto()


class Metric(Enum):
    RATIO = auto()
    DIFF = auto()


Row = List[str]
FloatColumns = List[bool]


@dataclass(frozen=True)
class Extremum:
    value: float
    values: Tuple[float, float] = (0.0, 0.0)
    line: int = 0

    def offer(self, value: float, v1: float, v2: float, line: int) -> "Extremum":
        # только строго большее значение вытесняет текущее
        if value > self.value:
            return replace(self, value=value, values=(v1, v2), line=line)
        return self


def diff_baseline() -> Extremum:
    return Extremum(DIFF_BASELINE)


def ratio_baseline() -> Extremum:
    return Extremum(RATIO_BASELINE)


@dataclass(frozen=True)
class DiffResult:
    max_diff: Extremum
    max_ratio: Extremum
    float_columns: FloatColumns = field(default_factory=list)
    rows: int = 0
    pairs_compared: int = 0
    pairs_skipped: int = 0


@dataclass(frozen=True)
class Verdict:
    metric: Metric
    extremum: Extremum
    limit: float
    passed: bool


@dataclass(frozen=True)
class Report:
    name1: str
    name2: str
    ratio: Optional[Verdict] = None
    diff: Optional[Verdict] = None

    @property
    def passed(self) -> bool:
        return all(v.passed for v in (self.ratio, self.diff) if v is not None)
