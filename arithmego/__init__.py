"""Timed arithmetic drills with difficulty-scored questions, streak scoring and local statistics."""

__version__ = "0.1.0"