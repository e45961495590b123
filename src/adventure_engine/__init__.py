"""
Adventure Engine - The interpretation core of a text-adventure game.

This package provides:
- A parser that turns free-form player text into structured commands
- A world of connected locations with lockable exits and switchable lights
- A macro substitution layer for narrative text
- A command log that can be saved and replayed
"""

__version__ = "0.1.0"
