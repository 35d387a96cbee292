# noisecancel

Offline adaptive noise cancellation for 16-bit PCM WAV files.

A reference recording of the noise and a recording of signal plus noise
go through a least-mean-squares (LMS) adaptive FIR filter with a step
size of 0.001. The filter learns to predict the noise in the noisy
recording, and what is left (the error signal) is written out as the
cleaned audio.

## Installation

```
pip install .
```

Python 3.10 or newer is needed. There are no third-party dependencies.
The tests use pytest (`pip install .[test]`).

## Commands

### `noisecancel-lms`

Runs the LMS filter over a noisy recording, using a separate noise
reference, and writes the filtered result as a WAV file.

```
noisecancel-lms
noisecancel-lms --input sound.wav --noise noise.wav --output output_LMS.wav --tap-length 40
```

Options and their defaults:

- `--input` (`sound.wav`): the noisy recording.
- `--noise` (`noise.wav`): the noise reference.
- `--output` (`output_LMS.wav`): where the filtered audio is written.
- `--tap-length` (`20`): number of filter taps.

Both inputs are read as 16-bit mono samples. The number of samples is
the input's data size divided by its block alignment; an input that
runs short is padded with silence. The output reuses the input's header,
and the filtered samples are clipped to the 16-bit range. On an I/O or
format error the command prints `Failed: ...` to standard error and
exits with status 1.

### `noisecancel-merge`

Combines two mono WAV files into one stereo file. The noise goes in the
left channel and the noisy mixture in the right.

```
noisecancel-merge
noisecancel-merge noise.wav noisy.wav combined.wav
```

The three positional arguments default to `1k.wav`, `10k.wav` and
`combine.wav`. Both inputs must have the same sample rate and bits per
sample; otherwise `Unmatched files` is printed and the exit status is 1.
If a file cannot be opened, `File can not be opened` is printed and the
exit status is 1. Samples are paired until either input runs out. The
output header is the noise file's header with two channels and doubled
byte rate, block alignment and data size.

## Library use

```python
from noisecancel.lms import lms, lms_output
from noisecancel.merge import merge_mono_to_stereo

# Filter sample sequences directly (floats in [-1, 1)).
error = lms(noise_samples, noisy_samples, len(noisy_samples), 20)

# Or work on files; the filtered signal is also returned.
filtered = lms_output("sound.wav", "output_LMS.wav", "noise.wav", tap_length=20)
merge_mono_to_stereo("1k.wav", "10k.wav", "combine.wav")
```

`lms(x, d, n, m)` uses `m - 1` taps and stops one sample short, so the
last sample of the returned error signal is always zero. It raises
`ValueError` when either sequence is empty or `n` or `m` is not positive.

Reading and writing the 44-byte canonical WAV header:

```python
from noisecancel.wavio import WavHeader, read_header, write_header

with open("sound.wav", "rb") as stream:
    header = read_header(stream)
print(header.sample_rate, header.num_channels, header.bits_per_sample)

raw = header.to_bytes()
assert WavHeader.from_bytes(raw) == header
```

`noisecancel.merge.stereo_header(header)` returns the two-channel header
built from a mono one.

## Control panel model

`noisecancel.controls` holds the interaction model for a panel with
three buttons (`Button.RUN`, `Button.START`, `Button.CLEAN`) and a
tap-length slider. `ControlPanel.handle(event)` takes a `MouseEvent`
(`MouseKind.MOVE`, `LEFT_DOWN` or `LEFT_UP` with coordinates) and
returns the `Action` to carry out, or `None`:

- pressing RUN returns `Action.PLAY_INPUT`;
- pressing START returns `Action.FILTER_AND_PLAY`;
- pressing CLEAN resets the tap length to 20 (`ControlPanel.reset`);
- any event inside the slider area sets the tap length from the pointer
  position (`slider_value`), starting at 20 on the left edge.

`button_judge(x, y)` tells which button lies under a point, and
`slider_position(tap_length)` gives the knob's horizontal position.

## What this package does not do

There is no graphical window and no audio playback. The control panel
model only tracks state and returns `Action` values; drawing the panel,
reading the mouse and playing the input or filtered file are left to
the caller.

## Errors

- `noisecancel.wavio.WavFormatError` (a `ValueError`) is raised when a
  header is shorter than 44 bytes, and by `lms_output` when the input's
  block alignment is zero.
- `noisecancel.merge.FormatMismatchError` (a `ValueError`) is raised
  when the two merge inputs differ in sample rate or bits per sample.