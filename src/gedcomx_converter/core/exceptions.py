class ConversionError(Exception):
    """Base exception for conversion failures."""


class ConfigError(ConversionError):
    """Raised when the configuration file is unusable."""
