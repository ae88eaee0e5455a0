"""Register/login form. Captures fields locally; nothing is sent anywhere yet."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class LoginField(str, Enum):
    USER_NAME = "user_name"
    EMAIL = "email"
    PASSWORD = "password"


FIELD_LABELS = {
    LoginField.USER_NAME: "Name",
    LoginField.EMAIL: "Email",
    LoginField.PASSWORD: "Password",
}


class LoginValues(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_name: str = ""
    email: str = ""
    password: str = ""


class LoginForm:
    def __init__(self) -> None:
        self._values = LoginValues()

    @property
    def values(self) -> LoginValues:
        return self._values

    def set_field(self, field: LoginField, value: str) -> None:
        self._values = self._values.model_copy(update={field.value: value})

    def missing_fields(self) -> list[LoginField]:
        return [field for field in LoginField if not getattr(self._values, field.value)]

    def submit(self) -> str:
        """Return the acknowledgment shown to the user."""
        missing = self.missing_fields()
        if missing:
            labels = ", ".join(FIELD_LABELS[field] for field in missing)
            return f"Please fill in: {labels}"

        logger.debug("Login form submitted")
        return (
            f"Username: {self._values.user_name}\n"
            f"Email: {self._values.email}\n"
            f"Password: {'*' * len(self._values.password)}"
        )
