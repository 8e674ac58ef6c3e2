"""PGM/PPM image input and output, gamma, Gaussian, bilateral and non-local means filters, PSNR and timing."""

__version__ = "0.1.0"