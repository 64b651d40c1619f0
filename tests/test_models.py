"""Settings input normalization and result helpers."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.domain.errors import BrokerUnreachable, LookupUrlRequired
from core.domain.models import FailureKind, FieldKey, PseudoBundle, SettingsInput, ValidationResult


def test_checkbox_mapping_keeps_checked_bundles() -> None:
    data = SettingsInput(
        selected_bundles={
            "article:node": "article:node",
            "page:node": 0,
            "image:media": "image:media",
            "tags:taxonomy_term": False,
        }
    )

    assert data.selected_bundles == {"article:node", "image:media"}


def test_bundle_list_drops_blank_entries() -> None:
    data = SettingsInput(selected_bundles=["article:node", "", "  ", None])

    assert data.selected_bundles == {"article:node"}


def test_missing_values_default_to_empty() -> None:
    data = SettingsInput(broker_url=None, gemini_url=None, selected_bundles=None)

    assert data.broker_url == ""
    assert data.gemini_url == ""
    assert data.selected_bundles == set()


def test_malformed_bundle_identifier_is_rejected() -> None:
    with pytest.raises(ValidationError):
        SettingsInput(selected_bundles=["article"])


def test_pseudo_bundles_are_parsed_and_sorted() -> None:
    data = SettingsInput(selected_bundles=["image:media", "article:node"])

    bundles = data.pseudo_bundles()

    assert [b.identifier for b in bundles] == ["article:node", "image:media"]
    assert bundles[1] == PseudoBundle(bundle="image", entity_type="media")
    assert all(b.is_known_entity_type for b in bundles)


def test_unknown_entity_type_is_flagged() -> None:
    assert not PseudoBundle.from_identifier("thing:commerce_product").is_known_entity_type


def test_result_helpers() -> None:
    result = ValidationResult(
        failures=[BrokerUnreachable("tcp://x:1").to_failure(), LookupUrlRequired().to_failure()]
    )

    assert not result.is_valid
    assert result.for_field(FieldKey.GEMINI_URL)[0].kind is FailureKind.LOOKUP_URL_REQUIRED
    assert result.messages()[0] == ("broker_url", "Cannot connect to message broker at tcp://x:1")
    assert ValidationResult().is_valid


@pytest.mark.parametrize("value", [5, 1.5, True])
def test_non_collection_bundles_are_rejected(value: object) -> None:
    with pytest.raises(ValidationError):
        SettingsInput(selected_bundles=value)
