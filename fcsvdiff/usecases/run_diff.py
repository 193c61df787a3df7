import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.types import DiffResult, Report
from ..domain.classify import check_shape, classify_columns
from ..domain.rules import compare_rows
from ..domain.verdict import build_report
from ..shared.utils import basename
from .load_tables import LoadedTable, load_pair

log = logging.getLogger(__name__)


@dataclass
class RunResult:
    result: DiffResult
    report: Report


def diff_tables(t1: LoadedTable, t2: LoadedTable, threshold: float = 0.0,
                max_ratio: Optional[float] = None, max_diff: Optional[float] = None) -> RunResult:
    check_shape(t1.rows, t2.rows, t1.path, t2.path)
    float_cols = classify_columns(t1.rows, t2.rows)
    result = compare_rows(t1.rows, t2.rows, float_cols, threshold, (t1.path, t2.path))
    report = build_report(result, basename(t1.path), basename(t2.path), max_ratio, max_diff)
    log.debug("max diff %r at line %d, max ratio %r at line %d",
              result.max_diff.value, result.max_diff.line,
              result.max_ratio.value, result.max_ratio.line)
    return RunResult(result, report)


def run_diff(path1: str, path2: str, opts) -> RunResult:
    t1, t2 = load_pair(path1, path2, opts.delim)
    return diff_tables(t1, t2, opts.threshold, opts.max_ratio, opts.max_diff)
