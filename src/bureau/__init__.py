"""Bureau: beautiful, opinionated Fedora for creatives."""

__version__ = "1.0.0"
