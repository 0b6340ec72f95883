class ConfigError(ValueError):
    """
    Exception raised when a formatter configuration is invalid.

    This covers configuration records built in code as well as mappings and files
    loaded from the outside: unknown keys, values of the wrong type, a negative width
    or a non-positive nesting limit.

    Example:
        >>> error = ConfigError("width must be a non-negative integer, got -1")
        >>> str(error)
        'width must be a non-negative integer, got -1'
    """

    pass


class NestingDepthError(RecursionError):
    """
    Exception raised when objects and arrays are nested deeper than allowed.

    Formatting recurses once per nesting level. Rather than letting deeply nested input
    exhaust the interpreter stack, the formatter refuses to go past the configured
    ``max_depth`` and raises this exception instead.

    Attributes:
        depth (int): The nesting depth that was about to be entered.
        limit (int): The configured maximum depth.

    Example:
        >>> error = NestingDepthError(129, 128)
        >>> str(error)
        'Nesting depth 129 exceeds the limit of 128'
    """

    def __init__(self, depth: int, limit: int) -> None:
        """
        Initialize the exception with the offending depth and the configured limit.

        Args:
            depth (int): The nesting depth that was about to be entered.
            limit (int): The configured maximum depth.
        """
        self.depth = depth
        self.limit = limit
        super().__init__(f"Nesting depth {depth} exceeds the limit of {limit}")


class FormatterInvariantError(AssertionError):
    """
    Exception raised when the formatter detects an internal inconsistency.

    The formatter accepts any input, so this never reflects a problem with the document
    being formatted. It means the engine reached a state it assumes to be impossible,
    such as a value dispatch that consumed no input where progress was required.

    Attributes:
        offset (int): Source offset at which the inconsistency was detected.

    Example:
        >>> error = FormatterInvariantError("value dispatch made no progress", 7)
        >>> str(error)
        'value dispatch made no progress (at offset 7)'
    """

    def __init__(self, message: str, offset: int) -> None:
        self.offset = offset
        super().__init__(f"{message} (at offset {offset})")
