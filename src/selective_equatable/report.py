"""Report generation for collection comparisons."""
from __future__ import annotations

from typing import Any, Dict, List

from .config import ReportConfig
from .core.models import ComparisonIssue, ComparisonResult, MismatchKind


class ReportBuilder:
    def __init__(self, config: ReportConfig) -> None:
        self.config = config

    def build_text(self, result: ComparisonResult, fields: tuple[str, ...] = ()) -> str:
        lines: List[str] = []
        lines.append("Equivalent" if result.equivalent else "Not equivalent")
        lines.append(f"- {self.config.first_label}: {result.first_count} records")
        lines.append(f"- {self.config.second_label}: {result.second_count} records")
        if fields:
            lines.append(f"- Compared fields: {', '.join(fields)}")
        else:
            lines.append("- Compared fields: all (whole-record equality)")
        if result.issue is not None:
            lines.extend(self._render_issue(result.issue))
        return "\n".join(lines).strip() + "\n"

    def build_json(self, result: ComparisonResult, fields: tuple[str, ...] = ()) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "equivalent": result.equivalent,
            "counts": {
                self.config.first_label: result.first_count,
                self.config.second_label: result.second_count,
            },
            "fields": list(fields),
            "issue": None,
        }
        issue = result.issue
        if issue is not None:
            payload["issue"] = {
                "kind": issue.kind.value,
                "identity": issue.identity,
                "field": issue.field,
                "message": issue.describe(),
            }
            if self.config.include_values and _has_values(issue):
                payload["issue"]["values"] = {
                    self.config.first_label: issue.first,
                    self.config.second_label: issue.second,
                }
        return payload

    def _render_issue(self, issue: ComparisonIssue) -> List[str]:
        lines = ["", f"Reason: {issue.kind.value}"]
        if issue.kind is not MismatchKind.DIFFERENT_COUNTS:
            lines.append(f"- id: {issue.identity!r}")
        if issue.field is not None:
            lines.append(f"- field: {issue.field}")
        if self.config.include_values and _has_values(issue):
            lines.append(f"- {self.config.first_label}: {self._truncate(issue.first)}")
            lines.append(f"- {self.config.second_label}: {self._truncate(issue.second)}")
        return lines

    def _truncate(self, value: Any) -> str:
        text = repr(value)
        limit = self.config.value_width
        if limit and len(text) > limit:
            return text[: max(limit - 3, 0)] + "..."
        return text


def _has_values(issue: ComparisonIssue) -> bool:
    return issue.kind in (MismatchKind.DIFFERENT_COUNTS, MismatchKind.VALUES_MISMATCH)


__all__ = ["ReportBuilder"]
