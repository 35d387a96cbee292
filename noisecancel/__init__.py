"""Offline LMS noise cancellation, WAV header handling, stereo merging and a control panel model."""

__version__ = "0.1.0"
__all__ = ["wavio", "merge", "lms", "controls"]