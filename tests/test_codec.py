"""Unit tests for the wire codec."""
import json

from hypothesis import given
from hypothesis import strategies as st

from tourai.conversation import Message, Role, Transcript, decode_response, encode_request
from tourai.conversation.codec import NO_DATA_MESSAGE

roles = st.sampled_from(list(Role))
messages = st.lists(st.builds(Message, role=roles, content=st.text()), max_size=8)


class TestEncodeRequest:
    """Tests for request serialization."""

    def test_payload_shape(self):
        """Test that the payload carries role/content pairs in order."""
        transcript = Transcript()
        transcript.append(Message(role=Role.USER, content="Hi"))
        transcript.append(Message(role=Role.ASSISTANT, content="Hello! Where to?"))
        transcript.append(Message(role=Role.SYSTEM, content="Network error: offline"))

        payload = json.loads(encode_request(transcript))

        assert payload == {
            "messages": [
                {"role": "user", "content": "Hi"},
                {"role": "assistant", "content": "Hello! Where to?"},
                {"role": "system", "content": "Network error: offline"},
            ]
        }

    def test_timestamp_not_sent(self):
        """Test that display-only fields stay out of the payload."""
        body = encode_request([Message(role=Role.USER, content="Rome")])
        assert b"timestamp" not in body

    def test_key_order(self):
        """Test that each message serializes role before content."""
        body = encode_request([Message(role=Role.USER, content="x")])
        assert body == b'{"messages":[{"role":"user","content":"x"}]}'

    def test_empty_transcript(self):
        """Test that an empty transcript encodes to an empty list."""
        assert json.loads(encode_request([])) == {"messages": []}

    @given(messages)
    def test_encoding_is_deterministic(self, items: list[Message]):
        """Property test: encoding the same messages twice is byte-identical."""
        assert encode_request(items) == encode_request(items)

    @given(messages)
    def test_order_preserved(self, items: list[Message]):
        """Property test: decoded payload lists messages in transcript order."""
        payload = json.loads(encode_request(items))
        assert [(m["role"], m["content"]) for m in payload["messages"]] == [
            (m.role.value, m.content) for m in items
        ]


class TestDecodeResponse:
    """Tests for response classification."""

    def test_success_body(self):
        """Test that a response body becomes an assistant message."""
        outcome = decode_response(b'{"response":"Paris is lovely in spring."}')
        assert outcome.role == Role.ASSISTANT
        assert outcome.content == "Paris is lovely in spring."

    def test_error_with_details(self):
        """Test that error and details are both reported."""
        outcome = decode_response(b'{"error":"rate_limited","details":"try later"}')
        assert outcome.role == Role.SYSTEM
        assert outcome.content == "Error: rate_limited - try later"

    def test_error_without_details(self):
        """Test that a missing details field adds no suffix."""
        outcome = decode_response(b'{"error":"bad_request"}')
        assert outcome.content == "Error: bad_request"

    def test_error_with_null_details(self):
        """Test that null details is treated as absent."""
        outcome = decode_response(b'{"error":"bad_request","details":null}')
        assert outcome.content == "Error: bad_request"

    def test_response_wins_over_error(self):
        """Test that a body with both keys counts as a success."""
        outcome = decode_response(b'{"response":"ok","error":"ignored"}')
        assert outcome.role == Role.ASSISTANT
        assert outcome.content == "ok"

    def test_non_string_response_falls_back_to_error(self):
        """Test that a malformed success key does not hide a valid error."""
        outcome = decode_response(b'{"response":42,"error":"upstream"}')
        assert outcome.role == Role.SYSTEM
        assert outcome.content == "Error: upstream"

    def test_not_json(self):
        """Test that a non-JSON body is reported verbatim."""
        outcome = decode_response(b"not json")
        assert outcome.role == Role.SYSTEM
        assert outcome.content == "Failed to parse response: not json"

    def test_json_without_known_keys(self):
        """Test that an unknown object is reported verbatim."""
        outcome = decode_response(b'{"message":"Internal server error"}')
        assert outcome.content == 'Failed to parse response: {"message":"Internal server error"}'

    def test_json_array(self):
        """Test that non-object JSON is unparseable."""
        outcome = decode_response(b'["response"]')
        assert outcome.content.startswith("Failed to parse response: ")

    def test_empty_body(self):
        """Test that an empty body gives the fixed no-data notice."""
        assert decode_response(b"").content == NO_DATA_MESSAGE
        assert decode_response(None).content == NO_DATA_MESSAGE

    def test_invalid_utf8_is_replaced(self):
        """Test that undecodable bytes do not raise."""
        outcome = decode_response(b"\xff\xfe oops")
        assert outcome.role == Role.SYSTEM
        assert "oops" in outcome.content

    @given(st.text(min_size=1))
    def test_always_one_message(self, text: str):
        """Property test: any non-empty body classifies into one message."""
        outcome = decode_response(text.encode("utf-8"))
        assert outcome.role in (Role.ASSISTANT, Role.SYSTEM)
