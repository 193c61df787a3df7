from fcsvdiff.domain.types import Alignment, DiffResult, Extremum, OutputMode
from fcsvdiff.domain.verdict import build_report, diff_verdict, ratio_percent, ratio_verdict
from fcsvdiff.ui.render import render


def _result(diff=0.1, ratio=1.1, vals=(1.0, 1.1), line=1):
    return DiffResult(Extremum(diff, vals, line), Extremum(ratio, vals, line), [True], 1, 1, 0)


def test_ratio_percent():
    assert ratio_percent(1.0) == 0.0
    assert round(ratio_percent(1.25), 6) == 25.0


def test_explain_both_metrics():
    report = build_report(_result(), "a.csv", "b.csv", max_ratio=0.2, max_diff=0.05)
    assert render(report, OutputMode.EXPLAIN).splitlines() == [
        "files: a.csv and b.csv",
        "",
        "maximum percent difference seen: 10.00%",
        "the values: +1.000000E+00 and +1.100000E+00 (line 1)",
        "result: PASSED",
        "",
        "maximum absolute difference seen: 1.00E-01",
        "the values: +1.000000E+00 and +1.100000E+00 (line 1)",
        "result: FAILED",
    ]


def test_explain_diff_only_has_no_separator():
    report = build_report(_result(), "a.csv", "b.csv", max_diff=0.5)
    lines = render(report, OutputMode.EXPLAIN).splitlines()
    assert lines[2] == "maximum absolute difference seen: 1.00E-01"
    assert lines[-1] == "result: PASSED"
    assert len(lines) == 5


def test_compact_both_metrics():
    report = build_report(_result(), "a.csv", "b.csv", max_ratio=0.05, max_diff=0.5)
    assert render(report) == (
        "a.csv b.csv 10.00 +1.000000E+00 +1.100000E+00 1 FAILED "
        "1.00E-01 +1.000000E+00 +1.100000E+00 1 PASSED\n"
    )


def test_compact_infinite_ratio():
    res = DiffResult(Extremum(5.0, (0.0, 5.0), 2), Extremum(float("inf"), (0.0, 5.0), 2))
    report = build_report(res, "a", "b", max_ratio=1e6)
    assert render(report) == "a b inf +0.000000E+00 +5.000000E+00 2 FAILED\n"


def test_aligned_columns_line_up():
    report = build_report(_result(), "a.csv", "b.csv", max_ratio=0.2, max_diff=0.05)
    header, row = render(report, OutputMode.ALIGNED, Alignment.RIGHT).splitlines()
    assert len(header) == len(row)
    assert header.split() == [
        "a.csv", "b.csv", "ratio_%", "val1_r", "val2_r", "line_r", "status_r",
        "abs_diff", "val1_d", "val2_d", "line_d", "status_d",
    ]
    assert row.split() == [
        "10.00", "+1.000000E+00", "+1.100000E+00", "1", "PASSED",
        "1.00E-01", "+1.000000E+00", "+1.100000E+00", "1", "FAILED",
    ]
    # правое выравнивание: концы подписей и значений совпадают
    assert header.index("status_r") + len("status_r") == row.index("PASSED") + len("PASSED")


def test_aligned_left_ratio_only():
    report = build_report(_result(), "a.csv", "b.csv", max_ratio=0.2)
    header, row = render(report, OutputMode.ALIGNED, Alignment.LEFT).splitlines()
    assert "abs_diff" not in header
    assert header.index("val1_r") == row.index("+1.000000E+00")


def test_report_passed_flag():
    assert build_report(_result(), "a", "b", max_ratio=0.2).passed
    assert not build_report(_result(), "a", "b", max_ratio=0.2, max_diff=0.05).passed


def test_limits_are_inclusive():
    res = DiffResult(Extremum(0.5, (1.0, 1.5), 1), Extremum(1.25, (1.0, 1.25), 1))
    assert ratio_verdict(res, 0.25).passed
    assert not ratio_verdict(res, 0.24).passed
    assert diff_verdict(res, 0.5).passed
    assert not diff_verdict(res, 0.49).passed


def test_overflowed_value_keeps_sign():
    res = DiffResult(Extremum(float("inf"), (float("inf"), 1.0), 1), Extremum(float("inf"), (float("inf"), 1.0), 1))
    report = build_report(res, "a", "b", max_diff=1.0)
    assert render(report) == "a b inf +inf +1.000000E+00 1 FAILED\n"
