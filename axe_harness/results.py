"""Typed view of the object ``axe.run`` resolves with.

Models are frozen and keep any keys they do not declare, so dumping a
result by alias gives back what the engine produced.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_MODEL_CONFIG = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class NodeResult(BaseModel):
    model_config = _MODEL_CONFIG

    html: str = ""
    # frame and shadow-DOM paths arrive as nested lists
    target: tuple[str | tuple[str, ...], ...] = ()
    impact: str | None = None
    failure_summary: str | None = Field(default=None, alias="failureSummary")


class RuleResult(BaseModel):
    """One rule outcome. Under ``violations`` this is a failed rule."""

    model_config = _MODEL_CONFIG

    rule_id: str = Field(alias="id")
    impact: str | None = None
    description: str = ""
    help: str = ""
    help_url: str | None = Field(default=None, alias="helpUrl")
    tags: tuple[str, ...] = ()
    nodes: tuple[NodeResult, ...] = ()

    @property
    def node_count(self) -> int:
        return len(self.nodes)


class ScanResult(BaseModel):
    model_config = _MODEL_CONFIG

    violations: tuple[RuleResult, ...] = ()
    passes: tuple[RuleResult, ...] = ()
    incomplete: tuple[RuleResult, ...] = ()
    inapplicable: tuple[RuleResult, ...] = ()
    url: str | None = None
    timestamp: str | None = None

    @property
    def violation_count(self) -> int:
        return len(self.violations)

    def violation_ids(self) -> list[str]:
        return [v.rule_id for v in self.violations]

    def violation(self, rule_id: str) -> RuleResult | None:
        for v in self.violations:
            if v.rule_id == rule_id:
                return v
        return None

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(by_alias=True, exclude_unset=True, indent=indent)

    @classmethod
    def from_json(cls, text: str | bytes) -> "ScanResult":
        return cls.model_validate_json(text)
