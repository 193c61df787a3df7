import csv

# Ошибки разбора; ошибки открытия файла идут как OSError
READ_ERRORS = (csv.Error, UnicodeDecodeError)


def load_csv_matrix(path: str, delim: str = ",") -> list[list[str]]:
    rows = []
    width = None
    with open(path, newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f, delimiter=delim, quotechar='"')
        for line in reader:
            # пустые строки пропускаем, нумерация идёт по записям
            if not line:
                continue
            if width is None:
                width = len(line)
            elif len(line) != width:
                raise csv.Error(
                    f"found record with {len(line)} fields at line {reader.line_num}, "
                    f"but the previous record has {width} fields"
                )
            rows.append(line)
    return rows
