class InvalidException(ValueError):
    """Raised when a mapping is used in an invalid state or created from an invalid object"""
