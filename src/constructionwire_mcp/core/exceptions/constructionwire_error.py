class ConstructionwireError(Exception):
    """
    Base class for every error raised by the tool lifecycle core.
    Callers can catch this to handle any tool failure uniformly.
    """

    pass
