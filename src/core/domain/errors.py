"""Validation error taxonomy.

Every failure is a user-correctable input error. Validators raise these; the
aggregating validator catches them and attaches them to their field.
"""

from __future__ import annotations

from typing import ClassVar

from core.domain.models import FailureKind, FieldKey, ValidationFailure


class ProbeConnectionError(Exception):
    """An adapter could not reach its remote system (refused, timed out, ...)."""


class SettingsValidationError(Exception):
    field: ClassVar[FieldKey]
    kind: ClassVar[FailureKind]

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_failure(self) -> ValidationFailure:
        return ValidationFailure(field=self.field, kind=self.kind, message=self.message)


class BrokerError(SettingsValidationError):
    field = FieldKey.BROKER_URL


class BrokerUnreachable(BrokerError):
    kind = FailureKind.BROKER_UNREACHABLE

    def __init__(self, broker_url: str) -> None:
        super().__init__(f"Cannot connect to message broker at {broker_url}")
        self.broker_url = broker_url


class ExpiryError(SettingsValidationError):
    field = FieldKey.JWT_EXPIRY


class NotATimeExpression(ExpiryError):
    kind = FailureKind.NOT_A_TIME_EXPRESSION

    def __init__(self, raw: str) -> None:
        super().__init__(f'"{raw}" is not a valid time or interval expression.')
        self.raw = raw


class NegativeInterval(ExpiryError):
    kind = FailureKind.NEGATIVE_INTERVAL

    def __init__(self) -> None:
        super().__init__("Time or interval expression cannot be negative")


class ZeroMagnitude(ExpiryError):
    kind = FailureKind.ZERO_MAGNITUDE

    def __init__(self) -> None:
        super().__init__('No numeric interval specified, for example "1 day"')


class NoRecognizedUnit(ExpiryError):
    kind = FailureKind.NO_RECOGNIZED_UNIT

    def __init__(self, units: tuple[str, ...]) -> None:
        super().__init__(
            f"No time interval found, please include one of ({', '.join(units)}). "
            "Plurals are also accepted."
        )
        self.units = units


class LookupServiceError(SettingsValidationError):
    field = FieldKey.GEMINI_URL


class InvalidUrl(LookupServiceError):
    kind = FailureKind.INVALID_URL

    def __init__(self, gemini_url: str) -> None:
        super().__init__(f"Cannot parse URL {gemini_url}")
        self.gemini_url = gemini_url


class ServiceUnreachable(LookupServiceError):
    kind = FailureKind.SERVICE_UNREACHABLE

    def __init__(self, gemini_url: str) -> None:
        super().__init__(f"Cannot connect to URL {gemini_url}")
        self.gemini_url = gemini_url


class LookupUrlRequired(LookupServiceError):
    kind = FailureKind.LOOKUP_URL_REQUIRED

    def __init__(self) -> None:
        super().__init__("Must enter Gemini URL before selecting bundles to display a pseudo field on.")
