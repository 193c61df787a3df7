from dataclasses import dataclass
from typing import Optional

from ..domain.types import Alignment, OutputMode
from ..domain.errors import UsageError
from ..shared.constants import DEFAULT_DELIM, DEFAULT_THRESHOLD


@dataclass(frozen=True)
class DiffOptions:
    max_diff: Optional[float] = None
    max_ratio: Optional[float] = None
    threshold: float = DEFAULT_THRESHOLD
    delim: str = DEFAULT_DELIM
    mode: OutputMode = OutputMode.COMPACT
    alignment: Optional[Alignment] = None
    strict_exit: bool = False


def resolve_mode(explain: bool, alignment: Optional[Alignment]) -> OutputMode:
    # explain важнее align
    if explain:
        return OutputMode.EXPLAIN
    if alignment is not None:
        return OutputMode.ALIGNED
    return OutputMode.COMPACT


def options_from_args(ns) -> DiffOptions:
    if ns.max_diff is None and ns.max_ratio is None:
        raise UsageError("Error: at least one of -d or -r must be specified.")
    return DiffOptions(
        max_diff=ns.max_diff,
        max_ratio=ns.max_ratio,
        threshold=ns.threshold,
        delim=ns.delim,
        mode=resolve_mode(ns.explain, ns.align),
        alignment=ns.align,
        strict_exit=getattr(ns, "strict_exit", False),
    )
