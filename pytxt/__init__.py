"""PyQt6 plain-text editor with cleanup tools and Gemini continuation."""

__version__ = "0.1.0"
