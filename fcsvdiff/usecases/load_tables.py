import logging
from dataclasses import dataclass
from pathlib import Path

from ..domain.types import Row
from ..domain.errors import InputError
from ..infra import csv_io, xlsx_io, ods_io
from ..shared.constants import XLSX_SUFFIXES, ODS_SUFFIXES, DEFAULT_DELIM

log = logging.getLogger(__name__)


@dataclass
class LoadedTable:
    path: str
    rows: list[Row]


def _reader_for(path: str, delim: str):
    suffix = Path(path).suffix.lower()
    if suffix in XLSX_SUFFIXES:
        return xlsx_io.load_xlsx_matrix, (path,), xlsx_io.READ_ERRORS
    if suffix in ODS_SUFFIXES:
        return ods_io.load_ods_matrix, (path,), ods_io.READ_ERRORS
    return csv_io.load_csv_matrix, (path, delim), csv_io.READ_ERRORS


def load_table(path: str, delim: str = DEFAULT_DELIM) -> LoadedTable:
    func, args, read_errors = _reader_for(path, delim)
    try:
        rows = func(*args)
    except OSError as e:
        raise InputError(path, "opening", e) from e
    except read_errors as e:
        raise InputError(path, "reading", e) from e
    log.debug("%s: %d rows", path, len(rows))
    return LoadedTable(path, rows)


def load_pair(path1: str, path2: str, delim: str = DEFAULT_DELIM) -> tuple[LoadedTable, LoadedTable]:
    # оба файла читаются целиком до сравнения
    return load_table(path1, delim), load_table(path2, delim)
