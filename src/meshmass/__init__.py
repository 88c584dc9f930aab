"""A library for computing the mass properties of closed triangular meshes."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("meshmass")
except PackageNotFoundError:
    __version__ = "uninstalled"
