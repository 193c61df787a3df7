import pytest


@pytest.fixture
def write_csv(tmp_path):
    def _write(name, rows, delim=","):
        p = tmp_path / name
        p.write_text("\n".join(delim.join(r) for r in rows) + "\n", encoding="utf-8")
        return str(p)
    return _write
