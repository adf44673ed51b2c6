"""
Business validation rules for user supplied fields.
Every check returns None on success and raises BusinessValidatorException otherwise.
"""

import re
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Optional, Union

from manager_logbook.core.config import Settings, settings as default_settings
from manager_logbook.core.exceptions import BusinessValidatorException

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
PHONE_PATTERN = re.compile(r"\+?[0-9 \-()]+")


class BaseBusinessValidator(ABC):
    """Validation capability consumed by the services, one method per constraint."""
    
    @abstractmethod
    def is_name_in_range(self, name: Optional[str]) -> None: ...
    
    @abstractmethod
    def is_address_in_range(self, address: Optional[str]) -> None: ...
    
    @abstractmethod
    def is_description_in_range(self, description: Optional[str]) -> None: ...
    
    @abstractmethod
    def is_email_valid(self, email: Optional[str]) -> None: ...
    
    @abstractmethod
    def is_phone_number_valid(self, phone_number: Optional[str]) -> None: ...
    
    @abstractmethod
    def is_date_valid(self, value: Optional[Union[date, datetime]]) -> None: ...
    
    @abstractmethod
    def is_rating_in_range(self, rating: Optional[int]) -> None: ...


class BusinessValidator(BaseBusinessValidator):
    """Default validator driven by the length and range limits in Settings."""
    
    def __init__(self, config: Settings = None):
        self.config = config or default_settings
    
    def _check_length(self, field: str, value: Optional[str], min_length: int, max_length: int) -> None:
        if value is None:
            raise BusinessValidatorException(f"{field} is required")
        # Minimum ignores padding; maximum counts what is stored
        length = len(value)
        if len(value.strip()) < min_length or length > max_length:
            raise BusinessValidatorException(
                f"{field} must be between {min_length} and {max_length} characters",
                details={"field": field.lower(), "length": length},
            )
    
    def is_name_in_range(self, name: Optional[str]) -> None:
        self._check_length("Name", name, self.config.NAME_MIN_LENGTH, self.config.NAME_MAX_LENGTH)
    
    def is_address_in_range(self, address: Optional[str]) -> None:
        self._check_length(
            "Address", address, self.config.ADDRESS_MIN_LENGTH, self.config.ADDRESS_MAX_LENGTH
        )
    
    def is_description_in_range(self, description: Optional[str]) -> None:
        self._check_length(
            "Description",
            description,
            self.config.DESCRIPTION_MIN_LENGTH,
            self.config.DESCRIPTION_MAX_LENGTH,
        )
    
    def is_email_valid(self, email: Optional[str]) -> None:
        if email is None or len(email) > self.config.EMAIL_MAX_LENGTH or not EMAIL_PATTERN.fullmatch(email):
            raise BusinessValidatorException("Email is not valid", details={"field": "email"})
    
    def is_phone_number_valid(self, phone_number: Optional[str]) -> None:
        if (
            phone_number is None
            or len(phone_number) > self.config.PHONE_MAX_LENGTH
            or not PHONE_PATTERN.fullmatch(phone_number)
        ):
            raise BusinessValidatorException("Phone number is not valid", details={"field": "phone_number"})
        digits = sum(ch.isdigit() for ch in phone_number)
        if digits < self.config.PHONE_MIN_DIGITS or digits > self.config.PHONE_MAX_DIGITS:
            raise BusinessValidatorException(
                f"Phone number must contain between {self.config.PHONE_MIN_DIGITS} "
                f"and {self.config.PHONE_MAX_DIGITS} digits",
                details={"field": "phone_number", "digits": digits},
            )
    
    def is_date_valid(self, value: Optional[Union[date, datetime]]) -> None:
        if value is None:
            raise BusinessValidatorException("Date is required")
        if value.year < self.config.MIN_VALID_YEAR:
            raise BusinessValidatorException(
                f"Date must not be before year {self.config.MIN_VALID_YEAR}",
                details={"date": value.isoformat()},
            )
        if isinstance(value, datetime):
            now = datetime.now(value.tzinfo) if value.tzinfo else datetime.now()
            in_future = value > now
        else:
            in_future = value > date.today()
        if in_future:
            raise BusinessValidatorException(
                "Date must not be in the future",
                details={"date": value.isoformat()},
            )
    
    def is_rating_in_range(self, rating: Optional[int]) -> None:
        if (
            rating is None
            or isinstance(rating, bool)
            or rating < self.config.RATING_MIN
            or rating > self.config.RATING_MAX
        ):
            raise BusinessValidatorException(
                f"Rating must be between {self.config.RATING_MIN} and {self.config.RATING_MAX}",
                details={"field": "rating"},
            )
