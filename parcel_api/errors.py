from dataclasses import dataclass


@dataclass
class ParcelRequestError(Exception):
    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}:{self.message}"


class MissingRequiredFieldError(ParcelRequestError):
    def __init__(self, field: str) -> None:
        super().__init__(
            code="MISSING_REQUIRED_FIELD",
            message=f"Required field '{field}' is missing",
        )
        self.field = field


class UnknownCustomerError(ParcelRequestError):
    def __init__(self, customer_id: str) -> None:
        super().__init__(
            code="UNKNOWN_CUSTOMER",
            message=f"Customer profile {customer_id} does not exist",
        )
        self.customer_id = customer_id


class TimestampOrderError(ParcelRequestError):
    def __init__(self, created_at: str, updated_at: str) -> None:
        super().__init__(
            code="TIMESTAMP_ORDER",
            message=f"updated_at {updated_at} is earlier than created_at {created_at}",
        )
