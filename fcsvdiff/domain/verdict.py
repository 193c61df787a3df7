from typing import Optional

from .types import DiffResult, Metric, Report, Verdict


def ratio_percent(ratio: float) -> float:
    return abs((ratio - 1.0) * 100.0)


def ratio_verdict(result: DiffResult, max_ratio: float) -> Verdict:
    ext = result.max_ratio
    passed = not (ratio_percent(ext.value) > max_ratio * 100.0)
    return Verdict(Metric.RATIO, ext, max_ratio, passed)


def diff_verdict(result: DiffResult, max_diff: float) -> Verdict:
    ext = result.max_diff
    passed = not (ext.value > max_diff)
    return Verdict(Metric.DIFF, ext, max_diff, passed)


def build_report(result: DiffResult, name1: str, name2: str,
                 max_ratio: Optional[float] = None, max_diff: Optional[float] = None) -> Report:
    ratio = ratio_verdict(result, max_ratio) if max_ratio is not None else None
    diff = diff_verdict(result, max_diff) if max_diff is not None else None
    return Report(name1, name2, ratio, diff)
