"""abpdev: open project logs and send desktop notifications."""

__version__ = "0.1.0"
