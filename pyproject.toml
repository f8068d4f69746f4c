[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clonosynth"
version = "2.0.0"
description = "A monophonic analogue-style synthesizer voice with step sequencer, drum machine and ribbon controller, rendered sample by sample"
requires-python = ">=3.10"
dependencies = []
keywords = ["synthesizer", "sequencer", "drum machine", "dsp", "audio", "lfo", "filter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["clonosynth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
