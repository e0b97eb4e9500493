from __future__ import annotations

import json
from typing import Any

from northcheck.errors import APIError, CheckError, ValidationError
from northcheck.models import RiskAssessment


def render_json(body: Any) -> str:
    return json.dumps(body, indent=2, ensure_ascii=False)


def _score_label(assessment: RiskAssessment) -> str:
    level = assessment.level
    if level is None:
        return "Risk Level: Unknown (Score: n/a)"
    return f"Risk Level: {level.value} (Score: {assessment.score})"


def render_report(body: Any) -> str:
    assessment = RiskAssessment.from_payload(body)
    if assessment is None:
        return "\n".join(["No risk information found.", render_json(body)])

    lines = [
        "",
        "--- Analysis Result ---",
        _score_label(assessment),
        f"Category(s): {assessment.category_label}",
        "",
        "--- Raw Details ---",
        render_json(body),
    ]
    return "\n".join(lines)


def render_error(error: CheckError, show_body: bool = False) -> str:
    """Build the single stderr message shown for a failed check."""
    if error.kind == "timeout":
        lines = ["Request timeout. Please check your internet connection and try again."]
    elif error.kind == "network":
        lines = ["Network error. Please check your internet connection."]
    elif isinstance(error, APIError):
        lines = [error.message]
        if show_body and error.body is not None:
            body = error.body if isinstance(error.body, str) else render_json(error.body)
            lines.append(f"Response data: {body}")
    elif error.kind in {"not_found", "permission_denied", "io_failure"}:
        lines = [f"Error: {error.message}", "   Please check the file path and permissions."]
    else:
        lines = [f"Error: {error.message}"]

    if isinstance(error, ValidationError) and error.hint:
        lines.append(f"   {error.hint}")
    return "\n".join(lines)
