"""Match takeout JSON names to media, read iCloud and Picasa album metadata, find sidecars."""

__version__ = "0.1.0"