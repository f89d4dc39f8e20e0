import enum


class ValidationErrorCode(enum.Enum):
    EMPTY_NAME = "empty_name"
    INVALID_NAME = "invalid_name"
    INVALID_DESCRIPTION = "invalid_description"
    INVALID_PRICE = "invalid_price"
    INVALID_CATEGORY = "invalid_category"


class ValidationError(Exception):
    """Raised when a dish cannot be created or updated from the given fields."""

    def __init__(self, code: ValidationErrorCode, message: str = ""):
        self.code = code
        self.message = message or code.value
        super().__init__(self.message)

    @property
    def reason(self) -> str:
        return self.code.value
