"""Brooklyn Voice Guide: speech-to-text, guide reply and text-to-speech proxy."""

__version__ = "1.0.0"
