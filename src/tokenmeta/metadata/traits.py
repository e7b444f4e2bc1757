"""Trait extraction from token metadata documents."""

from __future__ import annotations

from typing import Any

from tokenmeta.core.models import Attribute, MetadataDocument, TraitSummary
from tokenmeta.core.normalization import normalize_label, parse_int_value
from tokenmeta.metadata.uri import ipfs_to_gateway

# Field names differ between metadata producers
ATTRIBUTE_FIELDS = ("attributes", "traits")
LABEL_FIELDS = ("trait_type", "key")
IMAGE_FIELDS = ("image", "image_url")


def _first_present(mapping: dict[str, Any], fields: tuple[str, ...]) -> Any:
    """First value that is not None; an empty list still counts as present."""
    for name in fields:
        value = mapping.get(name)
        if value is not None:
            return value
    return None


def _first_non_empty(mapping: dict[str, Any], fields: tuple[str, ...]) -> Any:
    for name in fields:
        value = mapping.get(name)
        if value:
            return value
    return None


def read_attributes(doc: MetadataDocument) -> list[Attribute]:
    """Collect label/value attributes, skipping entries that are not objects."""
    entries = _first_present(doc, ATTRIBUTE_FIELDS)
    if not isinstance(entries, list):
        return []

    attributes = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        label = _first_non_empty(entry, LABEL_FIELDS)
        attributes.append(
            Attribute(
                label=label if isinstance(label, str) else "",
                value=entry.get("value"),
            )
        )
    return attributes


class TraitExtractor:
    """Pulls the pixel count and image URL out of a metadata document."""

    def __init__(self, gateway: str, target_label: str = "Pixel Count") -> None:
        self.gateway = gateway
        self.target_label = target_label
        self._target_key = normalize_label(target_label)

    def find_attribute(self, doc: MetadataDocument) -> Attribute | None:
        """Return the first attribute whose label matches the target."""
        for attribute in read_attributes(doc):
            if normalize_label(attribute.label) == self._target_key:
                return attribute
        return None

    def image_url(self, doc: MetadataDocument) -> str:
        """Return the image reference, rewritten to the gateway if on IPFS."""
        image = _first_non_empty(doc, IMAGE_FIELDS)
        if not isinstance(image, str):
            return ""
        return ipfs_to_gateway(image, self.gateway)

    def extract(self, doc: MetadataDocument) -> TraitSummary:
        """Extract traits. Never raises; missing data is reported as None or ""."""
        attribute = self.find_attribute(doc)
        return TraitSummary(
            pixel_count=parse_int_value(attribute.value) if attribute else None,
            image_url=self.image_url(doc),
        )
