"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Caller supplied a value outside the calculator's valid domain"""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class SubmissionNotFoundError(DomainException):
    """Eligibility submission does not exist"""

    pass
