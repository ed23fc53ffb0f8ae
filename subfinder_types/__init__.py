"""Data types for a subtitle finder: languages, Emby records, settings, series and subtitles."""

__version__ = "0.1.0"
__all__ = ["language", "emby", "config", "series", "subparser", "supplier"]