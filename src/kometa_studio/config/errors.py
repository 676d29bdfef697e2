class FormatError(ValueError):
    """Raised when config text cannot be decoded into a mapping."""

    pass


class ValidationError(ValueError):
    """Raised when an assembled config does not match the config schema."""

    pass
