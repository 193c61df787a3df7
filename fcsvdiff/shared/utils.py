import math
from pathlib import PurePath
from typing import Optional

from .constants import SCI_RE, UNKNOWN_NAME


def match_sci(s: str) -> bool:
    """Только форма записи, без разбора значения."""
    if s is None:
        return False
    return SCI_RE.fullmatch(s) is not None


def parse_sci(s: str) -> Optional[float]:
    if not match_sci(s):
        return None
    try:
        return float(s)
    except ValueError:
        return None


def is_sci(s: str) -> bool:
    return parse_sci(s) is not None


def basename(path: str) -> str:
    name = PurePath(path).name if path else ""
    return name or UNKNOWN_NAME


def align_text(text: str, width: int, alignment) -> str:
    if len(text) >= width:
        return text
    pad = width - len(text)
    name = getattr(alignment, "value", alignment)
    if name == "left":
        return text + " " * pad
    if name == "right":
        return " " * pad + text
    # center: лишний пробел справа
    left = pad // 2
    return " " * left + text + " " * (pad - left)


def fmt_num(fmt: str, value: float) -> str:
    if math.isinf(value):
        if value < 0:
            return "-inf"
        return "+inf" if "+" in fmt else "inf"
    return fmt % value
