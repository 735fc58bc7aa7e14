"""Count image signatures in MFA files and extract the first embedded bitmap."""

__version__ = "0.1.0"