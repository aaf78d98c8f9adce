"""Plain-text rendering of an AnalysisResult."""

from typing import List

from FDNORM.ir.models import AnalysisResult

_PK_STATUS_TEXT = {
    "candidate_key": "is a candidate key",
    "superkey": "is a superkey but not minimal",
    "not_a_key": "does NOT determine all attributes",
    "missing": "not stated",
}


def render_report(result: AnalysisResult) -> str:
    """Render parsed schema, diagnostics, candidate keys and the decomposition."""
    lines: List[str] = []

    lines.append("Parsed Attributes:")
    lines.append(" ".join(result.ddl.attributes))

    assessment = result.primary_key_assessment
    status_text = _PK_STATUS_TEXT[assessment.status]
    if assessment.stated:
        lines.append(f"Primary Key: {' '.join(assessment.stated)} ({status_text})")
    else:
        lines.append(f"Primary Key: ({status_text})")

    if result.rejected_dependencies:
        lines.append("")
        lines.append("Rejected Functional Dependencies:")
        for rejected in result.rejected_dependencies:
            where = f"line {rejected.line_number}: " if rejected.line_number is not None else ""
            detail = f" - {rejected.detail}" if rejected.detail else ""
            lines.append(f"  {where}{rejected.source!r} [{rejected.reason}]{detail}")

    lines.append("")
    lines.append("Candidate Keys:")
    for key in result.candidate_keys:
        lines.append(" ".join(key))

    lines.append("")
    lines.append("=== 3NF Decomposition ===")
    lines.extend(result.ddl_statements)

    return "\n".join(lines)
