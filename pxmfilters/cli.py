"""Command-line runner that times a filter on a PGM/PPM image."""

from __future__ import annotations

import argparse
import sys

from .filters import (
    bilateral_filter,
    gamma_correction,
    gaussian_filter,
    mean_var,
    non_local_means_filter,
)
from .ops import calc_psnr, cvt_color_gray
from .pnm import PxmFormatError, read_pxm, write_pxm
from .timing import CalcTime

_DEFAULT_INPUT = "img/lena.ppm"


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pxmfilters", description="Run and time image filters."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    def add(name: str, help_text: str, output: str | None):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("-i", "--input", default=_DEFAULT_INPUT)
        if output is not None:
            sub.add_argument("-o", "--output", default=output)
        sub.add_argument("--loop", type=_positive_int, default=10)
        return sub

    gamma = add("gamma", "gamma correction", "gamma.ppm")
    gamma.add_argument("--gamma", type=float, default=2.0)

    add("meanvar", "mean and variance", None)

    gauss = add("gauss", "Gaussian filter", "gauss.ppm")
    gauss.add_argument("--sigma", type=float, default=2.0)
    gauss.add_argument("--radius", type=int, default=None)

    bilateral = add("bilateral", "bilateral filter", "bf.ppm")
    bilateral.add_argument("--sigma-s", type=float, default=1.0)
    bilateral.add_argument("--sigma-r", type=float, default=16.0)
    bilateral.add_argument("--radius", type=int, default=None)

    nlm = add("nlm", "non-local means filter", "nlmf.pgm")
    nlm.add_argument("--h", type=float, default=20.0)
    nlm.add_argument("--search-r", type=int, default=3)
    nlm.add_argument("--template-r", type=int, default=1)
    return parser


def _timed(loop: int, action):
    timer = CalcTime()
    result = None
    for _ in range(loop):
        with timer:
            result = action()
    return result, timer.average(drop_first=loop > 1)


def _run(args) -> None:
    src = read_pxm(args.input)
    command = args.command

    if command == "meanvar":
        (mean, var), avg = _timed(args.loop, lambda: mean_var(src))
        print(f"time (avg): {avg:g} ms")
        print(f"mean: {mean:g}")
        print(f"var : {var:g}")
        return

    reference = src
    if command == "gamma":
        action = lambda: gamma_correction(src, args.gamma)  # noqa: E731
    elif command == "gauss":
        radius = int(args.sigma * 3) if args.radius is None else args.radius
        action = lambda: gaussian_filter(src, radius, args.sigma)  # noqa: E731
    elif command == "bilateral":
        radius = int(3 * args.sigma_s) if args.radius is None else args.radius
        action = lambda: bilateral_filter(  # noqa: E731
            src, radius, args.sigma_r, args.sigma_s
        )
    else:
        reference = cvt_color_gray(src) if src.channels == 3 else src
        action = lambda: non_local_means_filter(  # noqa: E731
            reference, args.template_r, args.search_r, args.h
        )

    dest, avg = _timed(args.loop, action)
    print(f"time (avg): {avg:g} ms")
    if command in ("bilateral", "nlm"):
        print(f"PSNR : {calc_psnr(reference, dest):g} dB")
    write_pxm(args.output, dest)


def main(argv=None) -> int:
    """Parse ``argv``, run the chosen filter and return an exit status."""
    args = _build_parser().parse_args(argv)
    try:
        _run(args)
    except (OSError, PxmFormatError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())