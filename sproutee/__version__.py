"""Version information for sproutee."""

try:
    from sproutee._version import __version__
except ImportError:
    # Fallback for development without tags or when running from source
    __version__ = "0.1.0"
