# pxmfilters

Read and write PGM/PPM images and run a small set of classic image filters on
them, timing each run:

- gamma correction
- mean and variance of the sample values
- Gaussian filter
- bilateral filter (3-channel images)
- non-local means filter (1-channel images)

The helpers the filters need are included too: edge-replicating borders, RGB to
grey conversion, splitting an image into channel planes and merging them back,
PSNR between two images, and a timer that averages repeated measurements.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `pxmfilters` command. It takes one
sub-command naming the operation; each reads `--input` (default
`img/lena.ppm`), runs the operation `--loop` times (default 10) and prints the
average time in milliseconds, leaving out the first run as warm-up when there
is more than one.

| Sub-command | Options (defaults) | Output |
|-------------|--------------------|--------|
| `gamma`     | `--gamma` (2.0) | `-o/--output` (`gamma.ppm`) |
| `meanvar`   | none | prints `mean:` and `var :` |
| `gauss`     | `--sigma` (2.0), `--radius` (3 × sigma) | `gauss.ppm` |
| `bilateral` | `--sigma-s` (1.0), `--sigma-r` (16.0), `--radius` (3 × sigma-s) | `bf.ppm` |
| `nlm`       | `--h` (20.0), `--search-r` (3), `--template-r` (1) | `nlmf.pgm` |

`bilateral` and `nlm` also print the PSNR between their input and output.
`nlm` converts a colour input to grey first. For example:

```
pxmfilters gauss -i photo.ppm -o smooth.ppm --sigma 1.5 --loop 5
pxmfilters --help
```

The command exits with status 1 and a message on standard error if the input
cannot be read or the operation rejects its arguments.

## Library use

```python
from pxmfilters.pnm import read_pxm, write_pxm
from pxmfilters.filters import gaussian_filter, bilateral_filter, non_local_means_filter
from pxmfilters.ops import cvt_color_gray, calc_psnr
from pxmfilters.timing import CalcTime

src = read_pxm("photo.ppm")

timer = CalcTime()
for _ in range(10):
    with timer:
        dest = gaussian_filter(src, 6, 2.0)
print(f"time (avg): {timer.average()} ms")
write_pxm("gauss.ppm", dest)

smoothed = bilateral_filter(src, 3, 16.0, 1.0)
print(f"PSNR: {calc_psnr(src, smoothed)} dB")

gray = cvt_color_gray(src)
denoised = non_local_means_filter(gray, 1, 3, 20.0)
write_pxm("nlmf.pgm", denoised)
```

### Modules

- `pxmfilters.image`: `Image` (rows, cols, interleaved channels and a
  `Depth`: `U8`, `S16`, `S32`, `F32`, `F64`) with `from_array`, `convert`,
  `copy`, `fill`, `randomize` and `info`; and `rand_value`. Conversion to
  `U8` clamps to 0–255; other conversions cast directly.
- `pxmfilters.pnm`: `read_pxm` reads `P2`, `P3`, `P5` and `P6` files with a
  maximum value up to 255; `write_pxm` writes 8-bit 1-channel images as `P5`
  and 3-channel images as `P6`. Malformed files raise `PxmFormatError`.
- `pxmfilters.ops`: `copy_make_border`, `cvt_color_gray`, `split`, `merge`,
  `calc_psnr` (returns `inf` for identical images, raises `ValueError` when
  sizes or channel counts differ).
- `pxmfilters.filters`: `gamma_correction`, `mean_var`, `gaussian_filter`,
  `bilateral_filter`, `non_local_means_filter`. All filters return 8-bit
  images.
- `pxmfilters.timing`: `CalcTime` with `start`, `end` (returns the elapsed
  milliseconds), `clear`, `average(drop_first, clear)`, `last` and
  `measurements`; it also works as a context manager.

## Limitations

The package only writes 8-bit binary PGM/PPM; other formats and depths must be
converted by other tools. The bilateral filter accepts only 3-channel images
and the non-local means filter only 1-channel images.