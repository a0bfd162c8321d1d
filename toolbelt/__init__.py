"""Small command-line utilities: line diff, word count, file descriptor inspection and debugger command parsing."""

__version__ = "0.1.0"