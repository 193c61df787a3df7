import logging
import math
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence, Tuple

from .types import Row, FloatColumns, DiffResult, diff_baseline, ratio_baseline
from .errors import FloatLayoutError, CellParseError
from ..shared.utils import match_sci

log = logging.getLogger(__name__)


def extract_floats(row: Row, float_cols: FloatColumns, name: str, line: int) -> List[Tuple[int, float]]:
    out = []
    for c, txt in enumerate(row):
        if c >= len(float_cols) or not float_cols[c]:
            continue
        # повторная проверка по ячейке, колонка уже признана числовой
        if not match_sci(txt):
            continue
        try:
            out.append((c, float(txt)))
        except ValueError:
            raise CellParseError(txt, name, line) from None
    return out


def compare_pair(v1: float, v2: float, threshold: float = 0.0) -> Optional[Tuple[float, float]]:
    """(abs_diff, ratio) для пары или None, если пара не учитывается."""
    if v1 == 0.0 and v2 == 0.0:
        return None
    if abs(v1) < threshold and abs(v2) < threshold:
        return None
    diff = abs(v1 - v2)
    if v1 == 0.0 or v2 == 0.0:
        ratio = math.inf
    else:
        a1, a2 = abs(v1), abs(v2)
        ratio = max(a1, a2) / min(a1, a2)
    return diff, ratio


def fold_pairs(acc: DiffResult, pairs: Iterable[Tuple[float, float]], line: int,
               threshold: float = 0.0) -> DiffResult:
    max_diff, max_ratio = acc.max_diff, acc.max_ratio
    compared, skipped = acc.pairs_compared, acc.pairs_skipped
    for v1, v2 in pairs:
        m = compare_pair(v1, v2, threshold)
        if m is None:
            skipped += 1
            continue
        compared += 1
        diff, ratio = m
        max_diff = max_diff.offer(diff, v1, v2, line)
        max_ratio = max_ratio.offer(ratio, v1, v2, line)
    return replace(acc, max_diff=max_diff, max_ratio=max_ratio,
                   pairs_compared=compared, pairs_skipped=skipped)


def compare_rows(rows1: Sequence[Row], rows2: Sequence[Row], float_cols: FloatColumns,
                 threshold: float = 0.0, names: Tuple[str, str] = ("csv1", "csv2")) -> DiffResult:
    """Второй проход: свёртка всех пар значений по числовым колонкам."""
    name1, name2 = names
    acc = DiffResult(diff_baseline(), ratio_baseline(), list(float_cols))
    for line, (r1, r2) in enumerate(zip(rows1, rows2), start=1):
        f1 = extract_floats(r1, float_cols, name1, line)
        f2 = extract_floats(r2, float_cols, name2, line)
        if not f1 and not f2:
            continue
        if len(f1) != len(f2):
            raise FloatLayoutError(line)
        acc = fold_pairs(acc, ((a, b) for (_, a), (_, b) in zip(f1, f2)), line, threshold)
    acc = replace(acc, rows=len(rows1))
    log.debug("compared %d pairs, skipped %d", acc.pairs_compared, acc.pairs_skipped)
    return acc
