"""Текстовый отчёт: explain, выровненная таблица и компактная строка."""
from typing import List, Optional

from ..domain.types import Alignment, OutputMode, Report, Verdict
from ..domain.verdict import ratio_percent
from ..shared.constants import (
    PASSED, FAILED, RATIO_HEADERS, DIFF_HEADERS, VALUE_FMT, DIFF_FMT, PERCENT_FMT,
)
from ..shared.utils import align_text, fmt_num


def status_text(v: Verdict) -> str:
    return PASSED if v.passed else FAILED


def ratio_fields(v: Verdict) -> List[str]:
    ext = v.extremum
    return [
        fmt_num(PERCENT_FMT, ratio_percent(ext.value)),
        fmt_num(VALUE_FMT, ext.values[0]),
        fmt_num(VALUE_FMT, ext.values[1]),
        str(ext.line),
        status_text(v),
    ]


def diff_fields(v: Verdict) -> List[str]:
    ext = v.extremum
    return [
        fmt_num(DIFF_FMT, ext.value),
        fmt_num(VALUE_FMT, ext.values[0]),
        fmt_num(VALUE_FMT, ext.values[1]),
        str(ext.line),
        status_text(v),
    ]


def _values_line(v: Verdict) -> str:
    v1, v2 = v.extremum.values
    return f"the values: {fmt_num(VALUE_FMT, v1)} and {fmt_num(VALUE_FMT, v2)} (line {v.extremum.line})"


def render_explain(report: Report) -> List[str]:
    lines = [f"files: {report.name1} and {report.name2}", ""]
    if report.ratio is not None:
        pct = fmt_num(PERCENT_FMT, ratio_percent(report.ratio.extremum.value))
        lines.append(f"maximum percent difference seen: {pct}%")
        lines.append(_values_line(report.ratio))
        lines.append(f"result: {status_text(report.ratio)}")
    if report.ratio is not None and report.diff is not None:
        lines.append("")
    if report.diff is not None:
        lines.append(f"maximum absolute difference seen: {fmt_num(DIFF_FMT, report.diff.extremum.value)}")
        lines.append(_values_line(report.diff))
        lines.append(f"result: {status_text(report.diff)}")
    return lines


def render_aligned(report: Report, alignment: Alignment) -> List[str]:
    headers = [report.name1, report.name2]
    row = ["", ""]
    if report.ratio is not None:
        headers.extend(RATIO_HEADERS)
        row.extend(ratio_fields(report.ratio))
    if report.diff is not None:
        headers.extend(DIFF_HEADERS)
        row.extend(diff_fields(report.diff))
    widths = [max(len(h), len(c)) for h, c in zip(headers, row)]
    return [
        " ".join(align_text(h, w, alignment) for h, w in zip(headers, widths)),
        " ".join(align_text(c, w, alignment) for c, w in zip(row, widths)),
    ]


def render_compact(report: Report) -> List[str]:
    fields = [report.name1, report.name2]
    if report.ratio is not None:
        fields.extend(ratio_fields(report.ratio))
    if report.diff is not None:
        fields.extend(diff_fields(report.diff))
    return [" ".join(fields)]


def render(report: Report, mode: OutputMode = OutputMode.COMPACT,
           alignment: Optional[Alignment] = None) -> str:
    if mode == OutputMode.EXPLAIN:
        lines = render_explain(report)
    elif mode == OutputMode.ALIGNED:
        lines = render_aligned(report, alignment or Alignment.LEFT)
    else:
        lines = render_compact(report)
    return "\n".join(lines) + "\n"
