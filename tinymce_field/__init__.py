"""TinyMCE rich-text field for a host CMS."""

__version__ = "1.0.0"
