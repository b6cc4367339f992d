"""Exceptions raised by the calculator.

Bad user input is never raised to the menu: it is re-prompted or coerced where
it is read. These exist for end of input and for misuse of the store.
"""


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    pass


class InputExhaustedError(CalculatorError):
    """Raised when the console input stream has no more tokens."""

    def __init__(self, message: str = "No more console input") -> None:
        super().__init__(message)


class UnknownScenarioError(CalculatorError):
    """Raised when a scenario name is not one of current / proposed."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown scenario: {name!r}")


class EmptyRatingsError(CalculatorError):
    """Raised when recording a scenario with no ratings."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"At least one rating is required for the {name} scenario")


class InvalidRatingError(CalculatorError):
    """Raised when a rating outside 0-100 reaches the store unclamped."""

    def __init__(self, name: str, value: int) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Rating for the {name} scenario must be between 0 and 100, got {value}")
