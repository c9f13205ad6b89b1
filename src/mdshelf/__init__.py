"""mdshelf - static dashboard site builder for Markdown note trees."""

__version__ = "0.1.0"
