import logging
from typing import Sequence

from .types import Row, FloatColumns
from .errors import RowCountError, ColumnCountError
from ..shared.utils import is_sci

log = logging.getLogger(__name__)


def check_shape(rows1: Sequence[Row], rows2: Sequence[Row], name1: str, name2: str) -> None:
    if len(rows1) != len(rows2):
        raise RowCountError(len(rows1), len(rows2))
    for line, (r1, r2) in enumerate(zip(rows1, rows2), start=1):
        if len(r1) != len(r2):
            raise ColumnCountError(line, name1, len(r1), name2, len(r2))


def classify_columns(rows1: Sequence[Row], rows2: Sequence[Row]) -> FloatColumns:
    """Первый проход: колонка числовая, только если в обоих файлах во всех
    строках там научная запись. Исключённая колонка назад не возвращается.
    """
    if not rows1:
        return []
    float_cols = [True] * len(rows1[0])
    for r1, r2 in zip(rows1, rows2):
        for c, flag in enumerate(float_cols):
            if not flag:
                continue
            if c >= len(r1) or c >= len(r2):
                float_cols[c] = False
            elif not (is_sci(r1[c]) and is_sci(r2[c])):
                float_cols[c] = False
    log.debug("float columns: %s", [c for c, f in enumerate(float_cols) if f])
    return float_cols
