import argparse
import logging
import sys

from .. import __version__
from ..domain.types import Alignment
from ..domain.errors import DiffError
from ..shared.constants import DEFAULT_DELIM, DEFAULT_THRESHOLD, EXIT_OK, EXIT_FAILED
from ..ui.render import render
from ..usecases.run_diff import run_diff
from .config import options_from_args
from .logging_setup import setup_logging

log = logging.getLogger(__name__)

_DELIM_ALIASES = {"\\t": "\t", "tab": "\t"}


def _delim(s: str) -> str:
    s = _DELIM_ALIASES.get(s.lower(), s)
    if len(s) != 1:
        raise argparse.ArgumentTypeError(f"delimiter must be a single character: {s!r}")
    return s


def _alignment(s: str) -> Alignment:
    try:
        return Alignment.parse(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fcsvdiff",
        description="Diffs floating-point numbers at corresponding positions within two CSVs.",
    )
    p.add_argument("-d", "--max-diff", type=float, metavar="REAL",
                   help="absolute difference above which the result is FAILED")
    p.add_argument("-r", "--max-ratio", type=float, metavar="REAL",
                   help="relative difference (fraction, 0.01 = 1%%) above which the result is FAILED")
    p.add_argument("-t", "--threshold", type=float, metavar="REAL", default=DEFAULT_THRESHOLD,
                   help="ignore pairs where both magnitudes are below this value (default: 0)")
    p.add_argument("--delim", type=_delim, metavar="CHAR", default=DEFAULT_DELIM,
                   help="field delimiter (default: ',')")
    p.add_argument("--explain", action="store_true", help="verbose multi-line report")
    p.add_argument("--align", type=_alignment, metavar="ALIGNMENT",
                   help="table output aligned left, right or center")
    p.add_argument("--strict-exit", action="store_true",
                   help=f"exit with {EXIT_FAILED} when any check FAILED")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("csv1")
    p.add_argument("csv2")
    return p


def main(argv=None) -> int:
    ns = build_parser().parse_args(argv)
    setup_logging(ns.verbose)
    try:
        opts = options_from_args(ns)
        res = run_diff(ns.csv1, ns.csv2, opts)
    except DiffError as e:
        print(e, file=sys.stderr)
        return e.exit_code
    log.debug("output mode: %s", opts.mode.name)
    sys.stdout.write(render(res.report, opts.mode, opts.alignment))
    if opts.strict_exit and not res.report.passed:
        return EXIT_FAILED
    return EXIT_OK


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
