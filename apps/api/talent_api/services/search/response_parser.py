"""Extract {"profileIds": [...], "reasoning": "..."} from free-text model output."""

import json
from dataclasses import dataclass
from enum import Enum


class ParseFailureKind(str, Enum):
    NO_JSON_FOUND = "no_json_found"
    MALFORMED_JSON = "malformed_json"
    SCHEMA_MISMATCH = "schema_mismatch"


class ResponseParseError(ValueError):
    """Raised when model output does not carry a usable profileIds payload."""

    def __init__(self, kind: ParseFailureKind, message: str):
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class ParsedModelResponse:
    profile_ids: list[str]
    reasoning: str


def find_json_object(text: str) -> str | None:
    """Return the first brace-delimited object in text, or None.

    Scans from the first "{" to its balanced "}" (braces inside JSON strings are
    ignored). If the braces never balance, falls back to the greedy span ending at
    the last "}" so the JSON decoder can report what is wrong with it.
    """
    start = text.find("{")
    if start == -1:
        return None
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
    end = text.rfind("}")
    if end <= start:
        return None
    return text[start : end + 1]


def parse_model_response(raw: str | None) -> ParsedModelResponse:
    """Parse model output. Tolerates prose, code fences and trailing commentary around the object."""
    candidate = find_json_object(raw or "")
    if candidate is None:
        raise ResponseParseError(ParseFailureKind.NO_JSON_FOUND, "No JSON object in model response.")
    try:
        data = json.loads(candidate)
    except (ValueError, RecursionError) as e:
        raise ResponseParseError(ParseFailureKind.MALFORMED_JSON, f"Model response JSON is invalid: {e}") from e
    if not isinstance(data, dict) or "profileIds" not in data:
        raise ResponseParseError(ParseFailureKind.SCHEMA_MISMATCH, "Model response has no profileIds field.")
    ids = data["profileIds"]
    if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
        raise ResponseParseError(ParseFailureKind.SCHEMA_MISMATCH, "profileIds is not a list of strings.")
    reasoning = data.get("reasoning")
    return ParsedModelResponse(
        profile_ids=ids,
        reasoning=reasoning if isinstance(reasoning, str) else "",
    )
