class ConverterException(ValueError):
    """
    Base exception for all rate conversion errors.
    """


class ParseException(ConverterException):
    """
    Raised when a rate expression cannot be parsed.
    """


class UnrecognizedSizeUnitError(ParseException):
    """
    Raised when a data size unit token is not in the accepted table.
    """

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Could not parse the provided data size unit {token!r}")


class UnrecognizedTimeUnitError(ParseException):
    """
    Raised when a time unit token is not in the accepted table.
    """

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Could not parse the provided time unit {token!r}")


class MalformedNumberError(ParseException):
    """
    Raised when the quantity is missing, malformed or not finite.
    """

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Error parsing number at {text!r}")


class MalformedSeparatorError(ParseException):
    """
    Raised when the size and time units are not separated by 'p' or '/'.
    """

    def __init__(self, found: str):
        self.found = found
        found_desc = repr(found) if found else "end of input"
        super().__init__(
            f"Expected 'p' or '/' between size and time units, found {found_desc}"
        )


class TrailingInputError(ParseException):
    """
    Raised in strict mode when input remains after a complete rate.
    """

    def __init__(self, remainder: str):
        self.remainder = remainder
        super().__init__(f"Unexpected trailing input {remainder!r}")


class MissingArgumentError(ConverterException):
    """
    Raised when a required input or output rate is absent or empty.
    """

    def __init__(self, message: str = "One or more required input arguments missing"):
        super().__init__(message)


class ConversionError(ConverterException):
    """
    Raised when a conversion does not produce a finite value.
    """


class ValidationError(ConverterException):
    """Raised when validation fails."""

    pass
