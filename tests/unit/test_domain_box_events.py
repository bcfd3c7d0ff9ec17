"""Unit tests for box and item domain events.

Tests cover:
- Envelope round-trip for every registered event (including event_id and
  occurred_at)
- Malformed payloads raise EnvelopeDeserializationFailed
- Envelope name mismatch
- Immutability
"""

import dataclasses

import pytest

from boxkeeper.domain.errors import EnvelopeDeserializationFailed
from boxkeeper.domain.events import (
    BoxProvisioned,
    BoxRemoved,
    BoxTitleChanged,
    Envelope,
    ItemProvisioned,
    ItemRemoved,
    ItemTitleChanged,
)
from boxkeeper.domain.value_objects.identifiers import BoxId, ItemId

SAMPLE_EVENTS = [
    BoxProvisioned(box_id=BoxId(1), title="Inbox"),
    BoxRemoved(box_id=BoxId(-5)),
    BoxTitleChanged(box_id=BoxId(2**63 - 1), title="Renamed"),
    ItemProvisioned(box_id=BoxId(1), item_id=ItemId(10), title="Milk"),
    ItemRemoved(box_id=BoxId(1), item_id=ItemId(-(2**63))),
    ItemTitleChanged(box_id=BoxId(1), item_id=ItemId(10), title="Oat milk"),
]


@pytest.mark.unit
class TestEventRoundTrip:
    """Test to_envelope()/from_envelope()."""

    @pytest.mark.parametrize("event", SAMPLE_EVENTS, ids=lambda e: type(e).__name__)
    def test_round_trip_preserves_every_field(self, event):
        # Act
        envelope = event.to_envelope()
        decoded = type(event).from_envelope(envelope)

        # Assert
        assert envelope.name == type(event).event_name
        assert decoded == event
        assert decoded.event_id == event.event_id
        assert decoded.occurred_at == event.occurred_at

    def test_payload_uses_plain_values(self):
        event = ItemProvisioned(box_id=BoxId(1), item_id=ItemId(10), title="Milk")

        payload = event.to_payload()

        assert payload["box_id"] == 1
        assert payload["item_id"] == 10
        assert payload["title"] == "Milk"
        assert payload["event_id"] == str(event.event_id)


@pytest.mark.unit
class TestEventDecodeFailures:
    """Test malformed envelopes."""

    def test_missing_field(self):
        payload = BoxProvisioned(box_id=BoxId(1), title="Inbox").to_payload()
        del payload["title"]

        with pytest.raises(EnvelopeDeserializationFailed) as exc_info:
            BoxProvisioned.from_envelope(Envelope(name="box.provisioned", payload=payload))

        assert exc_info.value.event_name == "box.provisioned"
        assert "title" in exc_info.value.reason

    def test_wrong_field_type(self):
        payload = BoxRemoved(box_id=BoxId(1)).to_payload()
        payload["box_id"] = "1"

        with pytest.raises(EnvelopeDeserializationFailed):
            BoxRemoved.from_envelope(Envelope(name="box.removed", payload=payload))

    def test_bool_is_not_an_identifier(self):
        payload = BoxRemoved(box_id=BoxId(1)).to_payload()
        payload["box_id"] = True

        with pytest.raises(EnvelopeDeserializationFailed):
            BoxRemoved.from_envelope(Envelope(name="box.removed", payload=payload))

    def test_identifier_out_of_range(self):
        payload = BoxRemoved(box_id=BoxId(1)).to_payload()
        payload["box_id"] = 2**64

        with pytest.raises(EnvelopeDeserializationFailed):
            BoxRemoved.from_envelope(Envelope(name="box.removed", payload=payload))

    def test_bad_timestamp(self):
        payload = BoxRemoved(box_id=BoxId(1)).to_payload()
        payload["occurred_at"] = "yesterday"

        with pytest.raises(EnvelopeDeserializationFailed):
            BoxRemoved.from_envelope(Envelope(name="box.removed", payload=payload))

    def test_empty_payload(self):
        with pytest.raises(EnvelopeDeserializationFailed):
            ItemRemoved.from_envelope(Envelope(name="box.item.removed"))

    def test_name_mismatch(self):
        envelope = BoxRemoved(box_id=BoxId(1)).to_envelope()

        with pytest.raises(EnvelopeDeserializationFailed):
            BoxProvisioned.from_envelope(envelope)


@pytest.mark.unit
class TestEventImmutability:
    """Events are frozen."""

    def test_cannot_modify_event(self):
        event = BoxProvisioned(box_id=BoxId(1), title="Inbox")

        with pytest.raises(dataclasses.FrozenInstanceError):
            event.title = "Changed"  # type: ignore[misc]

    def test_events_get_distinct_ids(self):
        first = BoxRemoved(box_id=BoxId(1))
        second = BoxRemoved(box_id=BoxId(1))

        assert first.event_id != second.event_id
        assert first != second
