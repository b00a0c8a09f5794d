class ConfigurationError(ValueError):
    """Raised when a token, definition, tokenizer or factory is built from bad input."""

class MalformedExpressionError(ArithmeticError):
    """Raised when a postfix sequence cannot be reduced to a single value."""
