"""
Unit tests for DownloadGateway

Tests token issuance bounds, validation before any upstream call,
redemption header reshaping and domain event publication.
"""

from unittest.mock import Mock

import pytest

from driftmind_web.application.download_gateway import DownloadGateway
from driftmind_web.application.event_publisher import EventPublisher
from driftmind_web.domain.downloads import FailureReason
from driftmind_web.domain.errors import ValidationError
from driftmind_web.domain.events import (
    DownloadTokenIssuedEvent,
    DownloadTokenRejectedEvent,
    FileRedeemedEvent,
    FileRedemptionFailedEvent,
)
from driftmind_web.infrastructure.driftmind_api_client import DriftMindApiClient

from tests.fixtures.value_object_fixtures import (
    FIXED_EXPIRY,
    create_file_result,
    create_token_result,
    failed_file_result,
    failed_token_result,
)


@pytest.fixture
def api_client():
    client = Mock(spec=DriftMindApiClient)
    client.request_download_token.return_value = create_token_result()
    client.fetch_file.return_value = create_file_result()
    return client


@pytest.fixture
def event_publisher():
    return Mock(spec=EventPublisher)


@pytest.fixture
def gateway(api_client, event_publisher):
    return DownloadGateway(api_client, event_publisher)


class TestIssueToken:
    """Test token issuance."""

    def test_success(self, gateway, api_client):
        result = gateway.issue_token("doc-1", 15)

        assert result.success is True
        assert result.token == "abc"
        assert result.document_id == "doc-1"
        assert result.expires_at == FIXED_EXPIRY
        assert result.expiration_minutes == 15
        api_client.request_download_token.assert_called_once_with("doc-1", 15)

    @pytest.mark.parametrize(
        "requested, sent",
        [(120, 60), (61, 60), (60, 60), (30, 30), (1, 1), (0, 15), (-10, 15)],
    )
    def test_expiration_bounded_before_upstream_call(
        self, gateway, api_client, requested, sent
    ):
        result = gateway.issue_token("doc-1", requested)

        api_client.request_download_token.assert_called_once_with("doc-1", sent)
        assert result.expiration_minutes == sent

    def test_default_expiration(self, gateway, api_client):
        gateway.issue_token("doc-1")
        api_client.request_download_token.assert_called_once_with("doc-1", 15)

    @pytest.mark.parametrize("document_id", ["", "   ", None])
    def test_blank_document_id_makes_no_upstream_call(
        self, gateway, api_client, document_id
    ):
        with pytest.raises(ValidationError) as exc_info:
            gateway.issue_token(document_id, 15)

        assert exc_info.value.message == "documentId is required"
        api_client.request_download_token.assert_not_called()

    @pytest.mark.parametrize(
        "reason", [FailureReason.UPSTREAM_FAILURE, FailureReason.TRANSPORT_FAILURE]
    )
    def test_upstream_failure(self, gateway, api_client, reason):
        api_client.request_download_token.return_value = failed_token_result(reason)

        result = gateway.issue_token("doc-1", 15)

        assert result.success is False
        assert result.token is None
        assert result.failure_reason is reason
        assert result.error_message == "token could not be generated"
        api_client.request_download_token.assert_called_once()

    def test_null_result_is_upstream_failure(self, gateway, api_client):
        api_client.request_download_token.return_value = None

        result = gateway.issue_token("doc-1", 15)

        assert result.success is False
        assert result.failure_reason is FailureReason.UPSTREAM_FAILURE

    def test_identical_requests_are_not_cached(self, gateway, api_client):
        gateway.issue_token("doc-1", 15)
        gateway.issue_token("doc-1", 15)

        assert api_client.request_download_token.call_count == 2

    def test_publishes_issued_event(self, gateway, event_publisher):
        gateway.issue_token("doc-1", 90)

        event = event_publisher.publish.call_args[0][0]
        assert isinstance(event, DownloadTokenIssuedEvent)
        assert event.aggregate_id == "doc-1"
        assert event.expiration_minutes == 60

    def test_publishes_rejected_event(self, gateway, api_client, event_publisher):
        api_client.request_download_token.return_value = failed_token_result()

        gateway.issue_token("doc-1", 15)

        event = event_publisher.publish.call_args[0][0]
        assert isinstance(event, DownloadTokenRejectedEvent)
        assert event.reason == "upstream_failure"

    def test_works_without_publisher(self, api_client):
        result = DownloadGateway(api_client).issue_token("doc-1", 15)
        assert result.success is True


class TestRedeemToken:
    """Test token redemption."""

    def test_success(self, gateway, api_client):
        result = gateway.redeem_token("abc")

        assert result.success is True
        assert result.file_bytes == b"%PDF-1.4 test"
        assert result.content_type == "application/pdf"
        assert result.content_disposition == (
            "attachment; filename=\"report.pdf\"; filename*=UTF-8''report.pdf"
        )
        api_client.fetch_file.assert_called_once_with("abc")

    def test_umlaut_filename_header(self, gateway, api_client):
        api_client.fetch_file.return_value = create_file_result(
            file_name="Bericht_März_Größe.pdf"
        )

        result = gateway.redeem_token("abc")

        assert result.content_disposition == (
            'attachment; filename="Bericht_Maerz_Groesse.pdf"; '
            "filename*=UTF-8''Bericht_M%C3%A4rz_Gr%C3%B6%C3%9Fe.pdf"
        )

    def test_missing_content_type_defaults(self, gateway, api_client):
        api_client.fetch_file.return_value = create_file_result(content_type=None)

        result = gateway.redeem_token("abc")

        assert result.content_type == "application/octet-stream"

    def test_missing_filename(self, gateway, api_client):
        api_client.fetch_file.return_value = create_file_result(file_name=None)

        result = gateway.redeem_token("abc")

        assert result.content_disposition == "attachment"
        assert result.file_name is None

    @pytest.mark.parametrize("token", ["", "  ", None])
    def test_blank_token_makes_no_upstream_call(self, gateway, api_client, token):
        with pytest.raises(ValidationError) as exc_info:
            gateway.redeem_token(token)

        assert exc_info.value.message == "token is required"
        api_client.fetch_file.assert_not_called()

    @pytest.mark.parametrize(
        "reason", [FailureReason.UPSTREAM_FAILURE, FailureReason.TRANSPORT_FAILURE]
    )
    def test_failure_message_does_not_distinguish_cause(self, gateway, api_client, reason):
        api_client.fetch_file.return_value = failed_file_result(reason)

        result = gateway.redeem_token("expired")

        assert result.success is False
        assert result.file_bytes == b""
        assert result.failure_reason is reason
        assert result.error_message == "download failed — token invalid or expired"

    def test_events_carry_token_prefix_only(self, gateway, api_client, event_publisher):
        token = "0123456789abcdef"

        gateway.redeem_token(token)
        redeemed = event_publisher.publish.call_args[0][0]

        api_client.fetch_file.return_value = failed_file_result()
        gateway.redeem_token(token)
        failed = event_publisher.publish.call_args[0][0]

        assert isinstance(redeemed, FileRedeemedEvent)
        assert redeemed.aggregate_id == "01234567..."
        assert redeemed.file_size == len(b"%PDF-1.4 test")
        assert isinstance(failed, FileRedemptionFailedEvent)
        assert failed.aggregate_id == "01234567..."
