class MalformedRecord(TypeError):
    """Raised when something that is not a well-typed TradeRecord is folded."""


class InvalidTradeLine(ValueError):
    """Raised when an input line fails parsing or validation."""

    def __init__(self, message: str, line_number: int | None = None, line: str | None = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
