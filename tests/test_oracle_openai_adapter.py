import json

import requests

from linkmanager.adapters.oracle_mock import MockOracleAdapter
from linkmanager.adapters.oracle_openai import OpenAIOracleAdapter
from linkmanager.domain.oracle import (
    ORACLE_ABSTAINED,
    ORACLE_NO_CANDIDATES,
    ORACLE_NOT_CONFIGURED,
    ORACLE_OUTPUT_PARSE_FAILED,
    ORACLE_REQUEST_FAILED,
    ORACLE_TIMED_OUT,
)


def _adapter(api_key: str = "test") -> OpenAIOracleAdapter:
    return OpenAIOracleAdapter(api_key=api_key, model="mock", base_url="https://example.com/")


def test_openai_oracle_parse_failure() -> None:
    result = _adapter()._parse_response("not-json")
    assert result.file_name is None
    assert result.signals == [ORACLE_OUTPUT_PARSE_FAILED]


def test_openai_oracle_parse_choice() -> None:
    payload = {"best_match_filename": " Mapas_v2.pdf ", "reasoning": "newer version"}
    result = _adapter()._parse_response(json.dumps(payload))
    assert result.file_name == "Mapas_v2.pdf"
    assert result.signals == []
    assert result.reasoning == "newer version"


def test_openai_oracle_empty_choice_abstains() -> None:
    payload = {"best_match_filename": "", "reasoning": "none fits"}
    result = _adapter()._parse_response(json.dumps(payload))
    assert result.file_name is None
    assert result.signals == [ORACLE_ABSTAINED]


def test_openai_oracle_without_key_or_candidates() -> None:
    assert _adapter(api_key="").choose("x", ["a.pdf"]).signals == [ORACLE_NOT_CONFIGURED]
    assert _adapter().choose("x", []).signals == [ORACLE_NO_CANDIDATES]


def test_openai_oracle_sends_candidates(monkeypatch) -> None:
    adapter = _adapter()
    captured: dict[str, object] = {}

    def _fake_post(messages, response_format, max_output_tokens):
        captured["messages"] = messages
        captured["response_format"] = response_format
        return {"output_text": json.dumps({"best_match_filename": "b.pdf", "reasoning": ""})}

    monkeypatch.setattr(adapter, "_post_response", _fake_post)

    result = adapter.choose('Email "Mapas"\nde 2010', ["a.pdf", "b.pdf"])

    assert result.file_name == "b.pdf"
    user_prompt = captured["messages"][1]["content"]
    assert "[a.pdf, b.pdf]" in user_prompt
    assert "Email 'Mapas' de 2010" in user_prompt
    assert captured["response_format"]["type"] == "json_schema"


def test_openai_oracle_timeout_and_failure(monkeypatch) -> None:
    adapter = _adapter()

    def _timeout(*args, **kwargs):
        raise requests.Timeout("slow")

    monkeypatch.setattr(requests, "post", _timeout)
    assert adapter.choose("x", ["a.pdf"]).signals == [ORACLE_TIMED_OUT]

    def _refused(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(requests, "post", _refused)
    assert adapter.choose("x", ["a.pdf"]).signals == [ORACLE_REQUEST_FAILED]


def test_openai_oracle_posts_to_responses_endpoint(monkeypatch) -> None:
    calls: list[dict] = []

    class _Response:
        def raise_for_status(self) -> None:
            return None

        def json(self) -> dict:
            return {
                "output": [
                    {
                        "content": [
                            {
                                "type": "output_text",
                                "text": json.dumps(
                                    {"best_match_filename": "a.pdf", "reasoning": "date"}
                                ),
                            }
                        ]
                    }
                ]
            }

    def _fake_post(url, headers, json, timeout):
        calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        return _Response()

    monkeypatch.setattr(requests, "post", _fake_post)

    result = _adapter().choose("x", ["a.pdf"])

    assert result.file_name == "a.pdf"
    assert calls[0]["url"] == "https://example.com/responses"
    assert calls[0]["headers"]["Authorization"] == "Bearer test"
    assert calls[0]["timeout"] == 20.0
    assert calls[0]["json"]["input"][0]["content"][0]["type"] == "input_text"


def test_mock_oracle_never_answers() -> None:
    result = MockOracleAdapter().choose("x", ["a.pdf"])
    assert result.file_name is None
    assert result.signals == [ORACLE_NOT_CONFIGURED]
