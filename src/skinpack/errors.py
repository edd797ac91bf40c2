"""SkinPack error hierarchy.

All custom exceptions inherit from SkinPackError, enabling callers
to catch the base class for blanket error handling or specific
subclasses for targeted recovery.  Any of these raised while a batch
is being converted aborts the whole batch.
"""


class SkinPackError(Exception):
    """Base exception for all SkinPack errors."""


class ConfigError(SkinPackError):
    """Raised when configuration loading or validation fails."""


class SkinReadError(SkinPackError):
    """Raised when the raw bytes of an input file cannot be read."""


class HashError(SkinPackError):
    """Raised when the texture digest of a skin cannot be computed."""


class DecodeError(SkinPackError):
    """Raised when a byte buffer cannot be decoded as an image."""


class RenderContextError(SkinPackError):
    """Raised when a pixel surface for sampling or rendering cannot be allocated."""


class NoSkinsFoundError(SkinPackError):
    """Raised when no PNG skins remain after input filtering."""
