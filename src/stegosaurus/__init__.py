"""Stegosaurus - a static template tree renderer.

Walks a template directory, registers shared partials, and renders or copies
every other file into an output directory using a YAML context.
"""

from .exceptions import SiteError, StegosaurusError
from .templating import BuildResult, SiteConfig, build_site

__version__ = "0.1.0"

__all__ = [
    "BuildResult",
    "SiteConfig",
    "SiteError",
    "StegosaurusError",
    "__version__",
    "build_site",
]
