from xml.parsers.expat import ExpatError
from xml.sax import SAXException
from zipfile import BadZipFile

from odf.opendocument import load
from odf.table import Table, TableRow, TableCell
from odf.text import P

from ..shared.constants import SHEET_FLOAT_FMT

READ_ERRORS = (BadZipFile, KeyError, ValueError, ExpatError, SAXException)


def _cell_text(cell: TableCell) -> str:
    # числа как в xlsx: целые остаются целыми, вещественные в научной записи
    if cell.getAttribute("valuetype") == "float":
        v = cell.getAttribute("value")
        if v is not None:
            if not any(ch in v for ch in ".eE"):
                return str(int(v))
            return SHEET_FLOAT_FMT % float(v)
    # отображаемый текст; если его нет, берём office:value
    text = "".join(
        str(node.data)
        for p in cell.getElementsByType(P)
        for node in getattr(p, "childNodes", [])
        if getattr(node, "data", None)
    ).strip()
    if text:
        return text
    v = cell.getAttribute("value")
    return "" if v is None else str(v)


def load_ods_matrix(path: str) -> list[list[str]]:
    doc = load(path)
    tables = doc.spreadsheet.getElementsByType(Table)
    if not tables:
        return []
    sheet = tables[0]
    rows = []
    max_cols = 0
    for row in sheet.getElementsByType(TableRow):
        rrep = int(row.getAttribute('numberrowsrepeated') or 1)
        line = []
        for cell in row.getElementsByType(TableCell):
            crep = int(cell.getAttribute('numbercolumnsrepeated') or 1)
            line.extend([_cell_text(cell)] * crep)
        # подрезаем правые пустые
        last = len(line) - 1
        while last >= 0 and line[last].strip() == "":
            last -= 1
        line = line[:last + 1]
        # пустые строки (в т.ч. хвост листа с большим повтором) не считаем
        if not line:
            continue
        for _ in range(rrep):
            rows.append(list(line))
        max_cols = max(max_cols, len(line))
    return [r + [""] * (max_cols - len(r)) for r in rows]
