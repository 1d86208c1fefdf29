"""README Emojifier: turn plain Markdown feature lists into polished ones."""

__version__ = "0.1.0"
