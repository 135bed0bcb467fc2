"""자유 텍스트에서 JSON 객체를 추출한다."""

import json
from typing import Any

from repo_pilot.errors import MalformedAiResponse


def _balanced_span(text: str, start: int) -> str | None:
    """start 위치의 '{'와 짝이 맞는 '}'까지의 문자열을 반환한다.

    문자열 리터럴 안의 괄호와 이스케이프는 무시한다. 짝이 없으면 None.
    """
    depth = 0
    in_string = False
    escaped = False

    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start : i + 1]
    return None


def extract_json_object(text: str | None) -> dict[str, Any]:
    """텍스트에서 처음 나오는 최상위 JSON 객체를 파싱한다.

    Gemini 검색 그라운딩 응답은 스키마를 강제할 수 없어서 설명 문장이나
    마크다운 코드 블록이 섞여 온다.

    Raises:
        MalformedAiResponse: 객체가 없거나, 괄호 짝이 맞지 않거나, 파싱 실패
    """
    if not text:
        raise MalformedAiResponse("The AI response was empty.")

    start = text.find("{")
    if start == -1:
        raise MalformedAiResponse(
            "Failed to get valid JSON details from the AI. "
            "The response did not contain a JSON object."
        )

    span = _balanced_span(text, start)
    if span is None:
        raise MalformedAiResponse(
            "The AI returned a JSON object with unbalanced braces."
        )

    try:
        value = json.loads(span)
    except json.JSONDecodeError as e:
        raise MalformedAiResponse(
            "The AI returned a malformed JSON response for suggestion details."
        ) from e

    if not isinstance(value, dict):
        raise MalformedAiResponse("The AI response JSON was not an object.")
    return value
