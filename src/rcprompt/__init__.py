"""rcprompt - a two-line shell prompt generator."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("rcprompt")
except PackageNotFoundError:
    __version__ = "0.0.0"
