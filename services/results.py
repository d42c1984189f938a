# file: services/results.py

import smtplib
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: Exception


Result = Union[Ok[T], Err]


def error_detail(error: Exception) -> dict:
    """
    Renders a provider exception as a JSON-safe dict for response bodies.
    SMTP reply errors also carry the server's code and response text.
    """
    detail: dict[str, Any] = {"name": type(error).__name__, "message": str(error)}
    if isinstance(error, smtplib.SMTPResponseException):
        detail["code"] = error.smtp_code
        smtp_error = error.smtp_error
        detail["response"] = smtp_error.decode("utf-8", "replace") if isinstance(smtp_error, bytes) else str(smtp_error)
    elif isinstance(error, smtplib.SMTPRecipientsRefused):
        detail["rejected"] = sorted(error.recipients)
    return detail
