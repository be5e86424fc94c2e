"""slug-cli package."""

from slug_cli.core.models import Case, SlugOptions
from slug_cli.core.slugify import Slugifier, slugify

__all__ = ["Case", "SlugOptions", "Slugifier", "slugify", "__version__"]

__version__ = "0.1.0"
