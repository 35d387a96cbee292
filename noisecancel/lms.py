"""Least-mean-squares adaptive noise cancellation for 16-bit PCM WAV files."""

from __future__ import annotations

import argparse
import struct
import sys
from typing import Sequence

from .wavio import WavFormatError, read_header, write_header

STEP_SIZE = 0.001
DEFAULT_TAP_LENGTH = 20
_SCALE = 32768.0


def lms(x: Sequence[float], d: Sequence[float], n: int, m: int) -> list[float]:
    """Run an LMS filter of ``m`` taps over ``n`` samples and return the error signal.

    ``x`` is the reference noise and ``d`` the noisy signal. As the filter
    only uses ``m - 1`` taps and stops one sample short, the last error
    sample stays zero.
    """
    if not x or not d or n <= 0 or m <= 0:
        raise ValueError("invalid LMS parameters")

    errors = [0.0] * n
    weights = [0.0] * m
    for index in range(n - 1):
        taps = min(m - 1, index + 1)
        past = x[index - taps + 1:index + 1][::-1]
        estimate = sum(w * s for w, s in zip(weights, past))
        error = d[index] - estimate
        errors[index] = error
        step = STEP_SIZE * error
        weights[:taps] = [w + step * s for w, s in zip(weights, past)]
    return errors


def _read_samples(stream, count: int) -> list[float]:
    data = stream.read(2 * count)
    whole = len(data) // 2
    values = [v / _SCALE for v in struct.unpack(f"<{whole}h", data[:2 * whole])]
    values.extend([0.0] * (count - whole))
    return values


def _to_int16(value: float) -> int:
    return max(-32768, min(32767, int(value * _SCALE)))


def lms_output(input_file, output_file, noise_file,
               tap_length: int = DEFAULT_TAP_LENGTH) -> list[float]:
    """Filter ``input_file`` against ``noise_file`` and write the result.

    The output keeps the input's header. Returns the filtered signal.
    """
    with open(input_file, "rb") as source, open(noise_file, "rb") as noise:
        header = read_header(source)
        read_header(noise)
        if header.block_align == 0:
            raise WavFormatError("block_align is zero")
        count = header.data_size // header.block_align
        x = _read_samples(noise, count)
        d = _read_samples(source, count)

    filtered = lms(x, d, count, tap_length)

    with open(output_file, "wb") as output:
        write_header(output, header)
        output.write(struct.pack(f"<{count}h", *map(_to_int16, filtered)))
    return filtered


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Cancel noise with an LMS filter.")
    parser.add_argument("--input", default="sound.wav")
    parser.add_argument("--noise", default="noise.wav")
    parser.add_argument("--output", default="output_LMS.wav")
    parser.add_argument("--tap-length", type=int, default=DEFAULT_TAP_LENGTH)
    args = parser.parse_args(argv)
    print(f"current TAP_LENGTH: {args.tap_length}")
    try:
        lms_output(args.input, args.output, args.noise, args.tap_length)
    except (OSError, ValueError) as exc:
        print(f"Failed: {exc}", file=sys.stderr)
        return 1
    print(f"The filtered audio file is saved as: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())