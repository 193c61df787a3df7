import re


# Научная запись: экспонента обязательна, "3.14" не подходит
SCI_PATTERN = r"[-+]?[0-9]*\.?[0-9]+[Ee][-+]?[0-9]+"
SCI_RE = re.compile(SCI_PATTERN)


# Нейтральные значения экстремумов
DIFF_BASELINE = 0.0
RATIO_BASELINE = 1.0  # "нет разницы"


# Значения по умолчанию для CLI
DEFAULT_DELIM = ","
DEFAULT_THRESHOLD = 0.0


PASSED = "PASSED"
FAILED = "FAILED"
UNKNOWN_NAME = "<?>"


# Заголовки табличного режима
RATIO_HEADERS = ("ratio_%", "val1_r", "val2_r", "line_r", "status_r")
DIFF_HEADERS = ("abs_diff", "val1_d", "val2_d", "line_d", "status_d")


# Форматы чисел
VALUE_FMT = "%+.6E"
DIFF_FMT = "%.2E"
PERCENT_FMT = "%.2f"


XLSX_SUFFIXES = (".xlsx", ".xlsm")
ODS_SUFFIXES = (".ods",)
SHEET_FLOAT_FMT = "%.16E"


# Коды выхода
EXIT_OK = 0
EXIT_FATAL = 1
EXIT_FAILED = 2
