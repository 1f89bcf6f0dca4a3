from __future__ import annotations

import json
import logging

import requests

from linkmanager.domain.oracle import (
    ORACLE_ABSTAINED,
    ORACLE_NO_CANDIDATES,
    ORACLE_NOT_CONFIGURED,
    ORACLE_OUTPUT_PARSE_FAILED,
    ORACLE_REQUEST_FAILED,
    ORACLE_TIMED_OUT,
    OracleAnswer,
    normalize_answer_name,
    sanitize_cell_text,
)
from linkmanager.ports.oracle_port import OraclePort

logger = logging.getLogger(__name__)

_CHOICE_SCHEMA = {
    "type": "object",
    "properties": {
        "best_match_filename": {
            "type": "string",
            "description": "The exact name of the matching file or empty string if none.",
        },
        "reasoning": {"type": "string", "description": "Brief reason for selection"},
    },
    "required": ["best_match_filename", "reasoning"],
    "additionalProperties": False,
}


class OpenAIOracleAdapter(OraclePort):
    def __init__(
        self, api_key: str, model: str, base_url: str, timeout_seconds: float = 20.0
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds

    def choose(self, cell_text: str, candidate_names: list[str]) -> OracleAnswer:
        if not self._api_key:
            return OracleAnswer(file_name=None, signals=[ORACLE_NOT_CONFIGURED])
        if not candidate_names:
            return OracleAnswer(file_name=None, signals=[ORACLE_NO_CANDIDATES])
        messages = self._build_messages(cell_text, candidate_names)
        try:
            payload = self._post_response(
                messages,
                response_format={
                    "type": "json_schema",
                    "name": "file_choice",
                    "schema": _CHOICE_SCHEMA,
                    "strict": True,
                },
                max_output_tokens=300,
            )
        except requests.Timeout:
            logger.warning("Oracle request timed out after %ss", self._timeout_seconds)
            return OracleAnswer(file_name=None, signals=[ORACLE_TIMED_OUT])
        except requests.RequestException as exc:
            logger.warning("Oracle request failed: %s", exc)
            return OracleAnswer(file_name=None, signals=[ORACLE_REQUEST_FAILED])
        return self._parse_response(self._extract_output_text(payload))

    def _build_messages(
        self, cell_text: str, candidate_names: list[str]
    ) -> list[dict[str, str]]:
        system_prompt = (
            "You match spreadsheet cells to document files. "
            "Output strict JSON with keys: best_match_filename, reasoning. "
            "best_match_filename MUST be copied exactly from the candidate list, "
            "or be an empty string if none of them is the document the cell refers to."
        )
        user_prompt = (
            "I have an Excel cell content that refers to a document.\n"
            f'Cell Content: "{sanitize_cell_text(cell_text)}"\n\n'
            "I found these potential file matches in the folder:\n"
            f"[{', '.join(candidate_names)}]\n\n"
            "Analyze the cell content (context, dates, keywords) and identify which "
            "of the filenames is the correct match."
        )
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]

    def _parse_response(self, content: str) -> OracleAnswer:
        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            return OracleAnswer(file_name=None, signals=[ORACLE_OUTPUT_PARSE_FAILED])
        if not isinstance(data, dict):
            return OracleAnswer(file_name=None, signals=[ORACLE_OUTPUT_PARSE_FAILED])
        file_name = normalize_answer_name(data.get("best_match_filename"))
        reasoning = data.get("reasoning")
        reasoning = reasoning.strip() if isinstance(reasoning, str) else ""
        signals = [] if file_name else [ORACLE_ABSTAINED]
        return OracleAnswer(file_name=file_name, signals=signals, reasoning=reasoning)

    def _post_response(
        self,
        messages: list[dict[str, str]],
        response_format: dict,
        max_output_tokens: int,
    ) -> dict:
        response = requests.post(
            f"{self._base_url}/responses",
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
            },
            json={
                "model": self._model,
                "input": self._to_response_input(messages),
                "text": {"format": response_format},
                "temperature": 0.0,
                "max_output_tokens": max_output_tokens,
            },
            timeout=self._timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    @staticmethod
    def _extract_output_text(payload: dict) -> str:
        direct_text = payload.get("output_text")
        if isinstance(direct_text, str) and direct_text.strip():
            return direct_text.strip()
        for item in payload.get("output", []):
            for block in item.get("content", []):
                if block.get("type") in ("output_text", "text"):
                    return (block.get("text") or "").strip()
                if block.get("type") == "output_json" and block.get("json") is not None:
                    return json.dumps(block.get("json"))
        return ""

    @staticmethod
    def _to_response_input(messages: list[dict[str, str]]) -> list[dict]:
        return [
            {
                "role": message.get("role"),
                "content": [{"type": "input_text", "text": message.get("content", "")}],
            }
            for message in messages
        ]
