"""Tests for ResultAccessor (parsed_content / display_content)."""
import pytest

from intent_classifier.core.domain.exceptions import (
    DecodeShapeError,
    DecodeSyntaxError,
    NoJsonFoundError,
    PipelineError,
)
from intent_classifier.core.domain.models import ClassificationResult, Intent, Params, RawResponse
from intent_classifier.core.services import ClassificationDecoder, MarkdownJsonExtractor, ResultAccessor


def make_response(content: str) -> RawResponse:
    return RawResponse(role="assistant", content=content)


@pytest.fixture
def accessor():
    return ResultAccessor(extractor=MarkdownJsonExtractor(), decoder=ClassificationDecoder())


class TestParsedContent:
    def test_fenced_send_email(self, accessor):
        raw = "```json\n{\"intent\":\"SendEmail\",\"params\":{\"recipient\":\"Turtle\",\"message\":\"can't attend\"}}\n```"

        result = accessor.parsed_content(make_response(raw))

        assert result.intent is Intent.SEND_EMAIL
        assert result.params.recipient == "Turtle"
        assert result.params.message == "can't attend"

    def test_plain_json(self, accessor):
        raw = """{
  "intent": "ScheduleMeeting",
  "params": {
    "recipient": "john@example.com",
    "message": "Let's schedule a meeting"
  }
}"""

        result = accessor.parsed_content(make_response(raw))

        assert result.intent is Intent.SCHEDULE_MEETING
        assert result.params.recipient == "john@example.com"

    def test_no_action_with_nulls(self, accessor):
        raw = """```json
{
  "intent": "NoAction",
  "params": {
    "recipient": null,
    "message": null
  }
}
```"""

        result = accessor.parsed_content(make_response(raw))

        assert result.intent is Intent.NO_ACTION
        assert result.params.recipient is None
        assert result.params.message is None

    def test_unicode_content(self, accessor):
        raw = '```json\n{"intent": "SendEmail", "params": {"recipient": "用户@example.com", "message": "Hello 世界! 🌍"}}\n```'

        result = accessor.parsed_content(make_response(raw))

        assert result.params.recipient == "用户@example.com"
        assert result.params.message == "Hello 世界! 🌍"

    def test_prose_fails_at_extraction(self, accessor):
        with pytest.raises(PipelineError) as exc_info:
            accessor.parsed_content(make_response("I cannot classify this."))

        err = exc_info.value
        assert err.stage == "extraction"
        assert isinstance(err.error, NoJsonFoundError)
        assert err.__cause__ is err.error

    def test_empty_content_fails_at_extraction(self, accessor):
        with pytest.raises(PipelineError) as exc_info:
            accessor.parsed_content(make_response(""))

        assert exc_info.value.stage == "extraction"

    def test_malformed_fenced_json_fails_at_decoding(self, accessor):
        raw = """```json
{
  "intent": "SendEmail",
  "params": {
    "recipient": "test@example.com"
    // Missing comma and closing brace
```"""

        with pytest.raises(PipelineError) as exc_info:
            accessor.parsed_content(make_response(raw))

        assert exc_info.value.stage == "decoding"
        assert isinstance(exc_info.value.error, DecodeSyntaxError)

    def test_unknown_intent_fails_at_decoding(self, accessor):
        with pytest.raises(PipelineError) as exc_info:
            accessor.parsed_content(make_response('{"intent":"DeleteAccount","params":{}}'))

        assert exc_info.value.stage == "decoding"
        assert isinstance(exc_info.value.error, DecodeShapeError)

    def test_whitespace_only_fence_fails_at_decoding(self, accessor):
        with pytest.raises(PipelineError) as exc_info:
            accessor.parsed_content(make_response("```json\n\n```"))

        assert exc_info.value.stage == "decoding"

    def test_deep_nesting_fails_at_decoding(self, accessor):
        raw = '{"intent": ' + "[" * 100000 + "]" * 100000 + ', "params": {}}'

        with pytest.raises(PipelineError) as exc_info:
            accessor.parsed_content(make_response(raw))

        assert exc_info.value.stage == "decoding"
        assert isinstance(exc_info.value.error, DecodeSyntaxError)

    def test_lone_surrogate_fails_at_decoding(self, accessor):
        raw = '{"intent":"SendEmail","params":{"recipient":"\\ud800"}}'

        with pytest.raises(PipelineError) as exc_info:
            accessor.parsed_content(make_response(raw))

        assert exc_info.value.stage == "decoding"
        assert isinstance(exc_info.value.error, DecodeShapeError)


class TestDisplayContent:
    def test_returns_canonical_json_not_markdown(self, accessor):
        raw = "```json\n{\"intent\":\"SendEmail\",\"params\":{\"recipient\":\"Turtle\",\"message\":\"can't attend\"}}\n```"

        content = accessor.display_content(make_response(raw))

        assert content == '{"intent":"SendEmail","params":{"recipient":"Turtle","message":"can\'t attend"}}'
        assert "```json" not in content

    def test_fills_absent_params_with_null(self, accessor):
        content = accessor.display_content(make_response('{"intent": "NoAction", "params": {}}'))

        assert content == '{"intent":"NoAction","params":{"recipient":null,"message":null}}'

    @pytest.mark.parametrize(
        "raw",
        [
            "I cannot classify this.",
            "",
            '```json\n{"intent": "SendEmail", "params": {\n```',
            '{"intent":"DeleteAccount","params":{}}',
            '```json\n{"a":1}\n',
        ],
    )
    def test_falls_back_to_raw_text(self, accessor, raw):
        assert accessor.display_content(make_response(raw)) == raw

    def test_deep_nesting_falls_back_to_raw_text(self, accessor):
        raw = '{"intent": ' + "[" * 100000 + "]" * 100000 + ', "params": {}}'

        assert accessor.display_content(make_response(raw)) == raw

    def test_lone_surrogate_falls_back_to_raw_text(self, accessor):
        raw = '{"intent":"SendEmail","params":{"recipient":"\\ud800"}}'

        assert accessor.display_content(make_response(raw)) == raw

    def test_render_falls_back_when_result_cannot_be_encoded(self, accessor):
        result = ClassificationResult.model_construct(
            intent=Intent.SEND_EMAIL,
            params=Params.model_construct(recipient="\ud800", message=None),
        )

        assert accessor.render(make_response("raw text"), result) == "raw text"
