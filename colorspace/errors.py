"""
Exceptions raised throughout colorspace.

Every error is an input-validation failure: nothing is retried and nothing is
partially applied. All of them derive from ``ColorSpaceError``, which is itself a
``ValueError`` so callers that only care about "bad input" can catch that.
"""


class ColorSpaceError(ValueError):
    """
    Base exception for all colorspace exceptions.
    """

    pass


class InvalidValueError(ColorSpaceError):
    """
    Raised when a string channel value cannot be read as a number.
    """

    def __init__(self, value):
        super().__init__(f"{value!r} is not a valid channel value.")
        self.value = value


class InvalidArgumentsError(ColorSpaceError):
    """
    Raised when a sequence or CSS argument list has the wrong number of items.
    """

    def __init__(self, args, expected: str, function: str | None = None):
        where = f" in {function}()" if function else ""
        super().__init__(f"Invalid arguments {args!r}{where}: expected {expected}.")
        self.args_given = args
        self.function = function


class UnsupportedFunctionError(ColorSpaceError):
    """
    Raised when a CSS color function has no model registered for it.
    """

    def __init__(self, function: str):
        super().__init__(f"Unsupported color function: {function}")
        self.function = function


class UnparseableColorError(ColorSpaceError):
    """
    Raised when text is neither a named color, a hex color nor a color function.
    """

    def __init__(self, css: str):
        super().__init__(f"Could not parse {css!r} as a CSS color.")
        self.css = css


class UnknownNamedColorError(ColorSpaceError):
    """
    Raised when a color name is not in the named color table.
    """

    def __init__(self, name: str):
        super().__init__(f"Unknown named color: {name}")
        self.name = name


class InvalidQuantumError(ColorSpaceError):
    """
    Raised when a posterization quantum is zero or negative.
    """

    def __init__(self, quantum):
        super().__init__(f"{quantum} is an invalid posterization quantum.")
        self.quantum = quantum
