"""Combine a mono noise recording and a mono noisy recording into one stereo file."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from typing import Sequence

from .wavio import HEADER_SIZE, WavFormatError, WavHeader, read_header, write_header


class FormatMismatchError(ValueError):
    """Raised when two inputs differ in sample rate or sample width."""


def stereo_header(header: WavHeader) -> WavHeader:
    """Return the header of a two-channel file built from a mono ``header``."""
    data_size = (header.data_size * 2) & 0xFFFFFFFF
    return dataclasses.replace(
        header,
        num_channels=2,
        byte_rate=(header.byte_rate * 2) & 0xFFFFFFFF,
        block_align=(header.block_align * 2) & 0xFFFF,
        data_size=data_size,
        chunk_size=(data_size + HEADER_SIZE - 8) & 0xFFFFFFFF,
    )


def merge_mono_to_stereo(noise_file, noisy_file, output_file) -> None:
    """Write noise to the left channel and the noisy signal to the right.

    Samples are paired until either input runs out.
    """
    with open(noise_file, "rb") as noise, open(noisy_file, "rb") as noisy:
        header_noise = read_header(noise)
        header_noisy = read_header(noisy)
        if (header_noise.sample_rate != header_noisy.sample_rate
                or header_noise.bits_per_sample != header_noisy.bits_per_sample):
            raise FormatMismatchError("input files have different formats")
        left = noise.read()
        right = noisy.read()

    pairs = min(len(left) // 2, len(right) // 2)
    end = 2 * pairs
    interleaved = bytearray(4 * pairs)
    interleaved[0::4] = left[0:end:2]
    interleaved[1::4] = left[1:end:2]
    interleaved[2::4] = right[0:end:2]
    interleaved[3::4] = right[1:end:2]

    with open(output_file, "wb") as output:
        write_header(output, stereo_header(header_noise))
        output.write(interleaved)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Merge a noise file and a noisy file into one stereo WAV."
    )
    parser.add_argument("noise", nargs="?", default="1k.wav")
    parser.add_argument("noisy", nargs="?", default="10k.wav")
    parser.add_argument("output", nargs="?", default="combine.wav")
    args = parser.parse_args(argv)
    try:
        merge_mono_to_stereo(args.noise, args.noisy, args.output)
    except OSError:
        print("File can not be opened")
        return 1
    except (FormatMismatchError, WavFormatError):
        print("Unmatched files")
        return 1
    print("Complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())