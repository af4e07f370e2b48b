class NoiseFieldError(Exception):
    """Base class for every error raised by noisefield."""


class ConfigurationError(NoiseFieldError, ValueError):
    """Bad render parameters, detected before any noise is evaluated."""


class NumericDegeneracyError(NoiseFieldError, ArithmeticError):
    """A non-finite noise value reached intensity conversion."""


class OutputError(NoiseFieldError, OSError):
    """The intensity grid could not be encoded or written."""
