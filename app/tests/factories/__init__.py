"""Test data factories for deterministic test data generation."""

from tests.factories.localization import (
    event_messages,
    make_dictionary,
    make_options,
    make_raw_tree,
)

__all__ = [
    "event_messages",
    "make_dictionary",
    "make_options",
    "make_raw_tree",
]
