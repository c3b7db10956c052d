"""Error types for the training log analytics package.

The analytics engines are total functions and never raise on documented
inputs. Errors only exist at the input boundary:

- SessionParseError: a backend row could not be validated (strict parsing)
- InvalidParameterError: an entry point received an out-of-domain option
"""


class TrainLogError(Exception):
    """Base class for all training log errors."""


class SessionParseError(TrainLogError):
    """Raised when a session row fails validation in strict mode.

    Attributes:
        index: Position of the offending row in the input list
        errors: Validation error details from pydantic
    """

    def __init__(self, index: int, errors: list[dict]):
        self.index = index
        self.errors = errors
        fields = ", ".join(".".join(str(p) for p in e.get("loc", ())) for e in errors)
        super().__init__(f"Invalid session row at index {index}: {fields or 'unknown field'}")


class InvalidParameterError(TrainLogError):
    """Raised when an entry point receives an invalid parameter.

    Attributes:
        name: Parameter name
        value: Rejected value
    """

    def __init__(self, name: str, value: object, reason: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}={value!r}: {reason}")
