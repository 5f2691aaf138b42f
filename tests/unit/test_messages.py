"""Unit tests for message and error collections."""

import pytest

from anet_gateway.models.messages import (
    Errors,
    Messages,
    ResponseMessage,
    TransactionMessages,
)


class TestMessageCollection:
    """Test collection behaviour shared by all message collections."""

    def test_empty_collection(self):
        errors = Errors()

        assert len(errors) == 0
        assert not errors
        assert errors.first is None
        assert list(errors) == []

    def test_from_pairs(self):
        # Arrange & Act
        messages = TransactionMessages.from_pairs([
            ("1", "This transaction has been approved."),
            ("252", "Your order has been received."),
        ])

        # Assert
        assert len(messages) == 2
        assert messages.first == ResponseMessage("1", "This transaction has been approved.")
        assert messages[1].code == "252"
        assert isinstance(messages[0:1], TransactionMessages)

    def test_equality_depends_on_type(self):
        pairs = [("E00027", "The transaction was unsuccessful.")]

        assert Messages.from_pairs(pairs) == Messages.from_pairs(pairs)
        assert Messages.from_pairs(pairs) != Errors.from_pairs(pairs)

    def test_to_list(self):
        errors = Errors.from_pairs([("6", "The credit card number is invalid.")])

        assert errors.to_list() == [{"code": "6", "text": "The credit card number is invalid."}]


class TestCoerce:
    """Test conversion of hand-built entries into collections."""

    def test_none(self):
        assert Errors.coerce(None) == Errors()

    def test_same_type_passes_through(self):
        errors = Errors.from_pairs([("2", "Declined.")])

        assert Errors.coerce(errors) is errors

    def test_list_of_mappings(self):
        errors = Errors.coerce([{"code": "2", "text": "Declined."}])

        assert errors == Errors([ResponseMessage("2", "Declined.")])

    def test_single_mapping(self):
        messages = Messages.coerce({"code": "I00001", "text": "Successful."})

        assert messages.first.code == "I00001"

    def test_skips_non_entries(self):
        errors = Errors.coerce([{"code": "2", "text": "Declined."}, "junk", 3])

        assert len(errors) == 1

    @pytest.mark.parametrize("value", [0, 2.5, False, "Declined.", b"E00027", object()])
    def test_scalars_become_empty(self, value):
        assert Errors.coerce(value) == Errors()

    def test_unwraps_gateway_wrapper(self):
        # Arrange
        raw = {"error": [
            {"errorCode": "6", "errorText": "The credit card number is invalid."},
            {"errorCode": "8", "errorText": "The credit card has expired."},
        ]}

        # Act
        errors = Errors.coerce(raw)

        # Assert
        assert [error.code for error in errors] == ["6", "8"]
        assert errors.first.text == "The credit card number is invalid."

    def test_unwraps_single_wrapped_entry(self):
        messages = TransactionMessages.coerce(
            {"message": {"code": 252, "description": "Your order has been received."}}
        )

        assert messages == TransactionMessages([ResponseMessage("252", "Your order has been received.")])

    def test_skips_entries_without_known_keys(self):
        errors = Errors.coerce([{"reason": "timeout"}, {"errorCode": "6"}])

        assert errors == Errors([ResponseMessage("6", None)])

    def test_envelope_wrapper(self):
        messages = Messages.coerce({"message": [{"code": "I00001", "text": "Successful."}]})

        assert messages.first == ResponseMessage("I00001", "Successful.")
