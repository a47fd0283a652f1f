"""slug-studio: slug tools for the festival website CMS."""

__version__ = "0.1.0"
