class ConfigurationError(ValueError):
    """Raised when avatar options are malformed or out of range.

    This is the only error the package raises, and only while options are
    being validated. A constructed avatar always renders.
    """
