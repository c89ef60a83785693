"""fedpost — Fedora Post-Install Tool"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("fedpost")
except PackageNotFoundError:
    __version__ = "dev"

__author__ = "fedpost"
