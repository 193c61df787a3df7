from ..shared.constants import EXIT_FATAL


class DiffError(Exception):
    exit_code = EXIT_FATAL


class UsageError(DiffError):
    pass


class InputError(DiffError):
    def __init__(self, path: str, action: str, reason):
        self.path = path
        self.action = action
        self.reason = reason
        super().__init__(f"Error {action} {path}: {reason}")


class ShapeError(DiffError):
    pass


class RowCountError(ShapeError):
    def __init__(self, rows1: int, rows2: int):
        self.rows1 = rows1
        self.rows2 = rows2
        super().__init__(f"Error: files have different number of rows ({rows1} vs {rows2})")


class ColumnCountError(ShapeError):
    def __init__(self, line: int, name1: str, cols1: int, name2: str, cols2: int):
        self.line = line
        self.cols1 = cols1
        self.cols2 = cols2
        super().__init__(
            f"Error: column count differs at line {line}: "
            f"{name1} has {cols1}, {name2} has {cols2}"
        )


class FloatLayoutError(ShapeError):
    def __init__(self, line: int):
        self.line = line
        super().__init__(f"Error: float layout differs at line {line}")


class CellParseError(DiffError):
    def __init__(self, text: str, name: str, line: int):
        self.text = text
        self.name = name
        self.line = line
        super().__init__(f"Error parsing '{text}' in {name} at line {line}")
