[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noisecancel"
version = "0.1.0"
description = "Offline LMS adaptive noise cancellation for 16-bit PCM WAV files, with a mono-to-stereo merge tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "wav", "lms", "adaptive filter", "noise cancellation", "dsp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
noisecancel-merge = "noisecancel.merge:main"
noisecancel-lms = "noisecancel.lms:main"

[tool.hatch.build.targets.wheel]
packages = ["noisecancel"]

[tool.pytest.ini_options]
addopts = "-ra"
