from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ..shared.constants import SHEET_FLOAT_FMT

READ_ERRORS = (InvalidFileException, BadZipFile, KeyError, ValueError)


def _cell_text(v) -> str:
    if v is None:
        return ""
    # вещественные -> научная запись, целые (идентификаторы) остаются как есть
    if isinstance(v, float):
        return SHEET_FLOAT_FMT % v
    return str(v)


def load_xlsx_matrix(path: str) -> list[list[str]]:
    wb = load_workbook(path, data_only=True, read_only=True)
    try:
        ws = wb[wb.sheetnames[0]]
        rows = []
        max_used = 0
        for row in ws.iter_rows(values_only=True):
            line = [_cell_text(v) for v in row]
            # подрезаем правые пустые
            last = len(line) - 1
            while last >= 0 and line[last].strip() == "":
                last -= 1
            used = last + 1
            if used == 0:
                continue
            rows.append(line[:used])
            max_used = max(max_used, used)
    finally:
        wb.close()
    # выравниваем по ширине
    return [r + [""] * (max_used - len(r)) for r in rows]
