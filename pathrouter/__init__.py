"""Method- and glob-based request routing, URL generation and a small WSGI demo."""

__version__ = "0.7.0"

__all__ = ["demo", "http", "recognizer", "router", "url_for"]