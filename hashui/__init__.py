"""Headless smartphone-style UI components (launcher, file explorer, status bar,
splash, animations, touch feedback) that draw onto a recording canvas."""

__version__ = "0.1.0"