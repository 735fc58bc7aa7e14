[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "retromfa"
version = "0.1.0"
description = "Scan MFA game files for embedded image signatures and extract the first bitmap they contain"
requires-python = ">=3.10"
dependencies = []
keywords = ["mfa", "bmp", "png", "jpeg", "extraction", "images"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
retromfa = "retromfa.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["retromfa"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
