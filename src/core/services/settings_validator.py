"""Settings validation orchestration.

This module is the only place that knows the order and the rules of the
settings checks. Network access goes through the client factories it is
given, which keeps the rules testable with fakes and keeps the CLI free of
validation logic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from adapters.date_expression import DateparserExpressionParser
from adapters.gemini_client import GeminiClient
from adapters.stomp_broker import build_broker_client
from core.config import AppSettings
from core.domain.errors import (
    BrokerUnreachable,
    InvalidUrl,
    LookupUrlRequired,
    ProbeConnectionError,
    ServiceUnreachable,
    SettingsValidationError,
)
from core.domain.models import SettingsInput, TimeInterval, ValidationFailure, ValidationResult
from core.interfaces.broker import BrokerClientFactory
from core.interfaces.expression import DateExpressionParser
from core.interfaces.lookup import LookupClientFactory
from core.services.time_interval import parse_time_interval

logger = logging.getLogger(__name__)


@dataclass
class ConfigValidator:
    """Validates a `SettingsInput` field by field.

    Holds collaborators only; no state survives between calls.
    """

    broker_factory: BrokerClientFactory
    lookup_factory: LookupClientFactory
    date_parser: DateExpressionParser
    settings: AppSettings

    def validate_broker(self, broker_url: str) -> None:
        """Connect, subscribe to the probe queue and unsubscribe.

        Malformed URLs, refused connections and protocol errors all end up
        as `BrokerUnreachable`.
        """

        client = None
        try:
            client = self.broker_factory(broker_url, timeout=self.settings.broker_timeout_seconds)
            client.connect()
            client.subscribe(self.settings.probe_queue)
            client.unsubscribe()
        except Exception as exc:
            logger.debug("Broker probe failed for %s: %s", broker_url, exc)
            raise BrokerUnreachable(broker_url) from exc
        finally:
            if client is not None:
                try:
                    client.disconnect()
                except Exception as exc:  # pragma: no cover - best effort close
                    logger.debug("Broker disconnect failed for %s: %s", broker_url, exc)

    def validate_expiry(self, raw: str) -> TimeInterval:
        return parse_time_interval(raw, self.date_parser)

    def validate_lookup_service(self, gemini_url: str, selected_bundle_count: int) -> None:
        """Check the lookup URL and its dependency on the bundle selection."""

        url = gemini_url.strip()
        if not url:
            if selected_bundle_count > 0:
                raise LookupUrlRequired()
            return

        lookup_logger = logging.getLogger("islandora")
        try:
            client = self.lookup_factory(url, lookup_logger, timeout=self.settings.lookup_timeout_seconds)
        except ValueError as exc:
            raise InvalidUrl(url) from exc

        try:
            # Only reachability matters; the lookup result is not interpreted.
            client.find_by_uri(self.settings.probe_uri)
        except ProbeConnectionError as exc:
            logger.debug("Lookup probe failed for %s: %s", url, exc)
            raise ServiceUnreachable(url) from exc

    def validate_all(self, data: SettingsInput) -> ValidationResult:
        """Run every check and collect all failures (broker, expiry, lookup)."""

        failures: list[ValidationFailure] = []

        checks = (
            lambda: self.validate_broker(data.broker_url),
            lambda: self.validate_expiry(data.jwt_expiry),
            lambda: self.validate_lookup_service(data.gemini_url, len(data.selected_bundles)),
        )
        for check in checks:
            try:
                check()
            except SettingsValidationError as exc:
                logger.warning("%s: %s", exc.field.value, exc.message)
                failures.append(exc.to_failure())

        logger.info("Settings validation finished with %d failure(s)", len(failures))
        return ValidationResult(failures=failures)


def build_validator(settings: AppSettings | None = None) -> ConfigValidator:
    """Validator wired to the production adapters (STOMP, Gemini, dateparser)."""

    settings = settings or AppSettings()
    return ConfigValidator(
        broker_factory=build_broker_client,
        lookup_factory=GeminiClient.create,
        date_parser=DateparserExpressionParser(settings.date_languages),
        settings=settings,
    )
