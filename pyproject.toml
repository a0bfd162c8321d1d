[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toolbelt"
version = "0.1.0"
description = "Small command-line utilities: a line-based diff, a word counter, an open file descriptor inspector and a debugger command parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["diff", "lcs", "wc", "file descriptors", "procfs", "command line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rdiff = "toolbelt.rdiff:main"
toolbelt-wc = "toolbelt.wc:main"
inspect-fds = "toolbelt.inspect_fd:main"

[tool.hatch.build.targets.wheel]
packages = ["toolbelt"]

[tool.pytest.ini_options]
addopts = "-ra"
