"""Model serialization tests."""

import pytest
from pydantic import ValidationError

from qstash_client import EventsRequest, PublishOptions, ScheduleOptions
from qstash_client.models import Event, EventState, EventsResponse, MessageResponse


class TestPublishOptions:
    """Test header rendering for delivery options."""

    def test_empty_options_render_no_headers(self):
        assert PublishOptions().to_headers() == {}

    def test_forwarding_rules(self):
        """Upstash-* and Content-Type pass through, everything else is forwarded."""
        headers = PublishOptions().to_headers(
            {
                "Content-Type": "text/plain",
                "Upstash-Retries": "1",
                "Authorization": "Bearer downstream",
            }
        )

        assert headers == {
            "Content-Type": "text/plain",
            "Upstash-Retries": "1",
            "Upstash-Forward-Authorization": "Bearer downstream",
        }

    def test_options_override_passthrough_headers(self):
        headers = PublishOptions(retries=5).to_headers({"Upstash-Retries": "1"})
        assert headers["Upstash-Retries"] == "5"

    def test_options_override_passthrough_headers_in_any_case(self):
        headers = PublishOptions(retries=5, content_type="application/json").to_headers(
            {"upstash-retries": "1", "CONTENT-TYPE": "text/plain"}
        )

        assert headers == {"Content-Type": "application/json", "Upstash-Retries": "5"}

    def test_schedule_headers_replace_caller_spelling(self):
        headers = ScheduleOptions(cron="0 * * * *").to_headers({"upstash-cron": "* * * * *"})
        assert headers == {"Upstash-Cron": "0 * * * *"}

    def test_durations(self):
        headers = PublishOptions(delay="1h", timeout=20, not_before=1700000000).to_headers()
        assert headers["Upstash-Delay"] == "1h"
        assert headers["Upstash-Timeout"] == "20s"
        assert headers["Upstash-Not-Before"] == "1700000000"

    def test_content_based_deduplication(self):
        headers = PublishOptions(content_based_deduplication=True).to_headers()
        assert headers == {"Upstash-Content-Based-Deduplication": "true"}

    def test_negative_retries_rejected(self):
        with pytest.raises(ValidationError):
            PublishOptions(retries=-1)

    def test_schedule_requires_cron(self):
        with pytest.raises(ValidationError):
            ScheduleOptions()


class TestEventsRequest:
    """Test query parameter rendering."""

    def test_empty_request(self):
        assert EventsRequest().to_query_params() == []

    def test_all_parameters(self):
        request = EventsRequest(
            cursor="next_page",
            message_id="msg123",
            state="active",
            url="http://example.com",
            topic_name="topic1",
            schedule_id="sched1",
            queue_name="queue1",
            from_date=1234567890,
            to_date=1234567899,
            count=100,
            order="earliestFirst",
        )

        assert request.to_query_params() == [
            ("cursor", "next_page"),
            ("messageId", "msg123"),
            ("state", "active"),
            ("url", "http://example.com"),
            ("topicName", "topic1"),
            ("scheduleId", "sched1"),
            ("queueName", "queue1"),
            ("fromDate", "1234567890"),
            ("toDate", "1234567899"),
            ("count", "100"),
            ("order", "earliestFirst"),
        ]

    def test_camel_case_input(self):
        request = EventsRequest.model_validate({"messageId": "m1", "queueName": "q"})
        assert request.to_query_params() == [("messageId", "m1"), ("queueName", "q")]

    def test_count_bounds(self):
        with pytest.raises(ValidationError):
            EventsRequest(count=1001)


class TestEvent:
    """Test event parsing."""

    def test_minimal_event(self):
        event = Event.model_validate(
            {"time": 1645564800000, "messageId": "msg_123", "header": {}, "body": "SGVsbG8=", "state": "CREATED"}
        )

        assert event.state == EventState.CREATED
        assert event.body == b"Hello"
        assert event.url is None
        assert event.topic_name is None

    def test_unknown_state_maps_to_none(self):
        event = Event.model_validate({"messageId": "m", "state": "SOMETHING_NEW"})
        assert event.state == EventState.NONE

    def test_binary_body_dumps_as_base64(self):
        event = Event(message_id="m", body=b"\x00\xff\x42\x13\x37")

        dumped = event.to_wire()

        assert dumped["body"] == "AP9CEzc="
        assert Event.model_validate(dumped).body == b"\x00\xff\x42\x13\x37"

    def test_null_body_is_empty(self):
        event = Event.model_validate({"messageId": "m", "body": None})
        assert event.body == b""

    def test_invalid_base64_rejected(self):
        with pytest.raises(ValidationError):
            Event.model_validate({"messageId": "m", "body": "not base64!"})

    def test_response_defaults(self):
        response = EventsResponse.model_validate({})
        assert response.cursor is None
        assert response.events == []


class TestMessageResponse:
    def test_optional_fields(self):
        response = MessageResponse.model_validate({"messageId": "msd_1234"})
        assert response.url is None
        assert response.deduplicated is None
