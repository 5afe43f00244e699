# site_distill/__init__.py
"""
SiteDistill package initializer.
Defines package version and exposes the console entry point.
"""
__version__ = "0.1.0"

# site_distill.cli stays the submodule; the click command is exported as main
from .cli import main  # noqa: E402

__all__ = ["__version__", "main"]
