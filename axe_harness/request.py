"""Immutable description of one axe-core run.

``ScanRequest.for_session(session)`` is a full-page scan with every default
rule. Each ``with_*`` method returns a new request and leaves the receiver
untouched, so a request can be shared or reused as a base without leaking
configuration between tests.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import Any, Iterable, Mapping

from axe_harness.core.errors import ConflictingScopeError, InvalidConfigurationError
from axe_harness.session import BrowserSession


def _string_list(values: Iterable[str], what: str) -> tuple[str, ...]:
    if isinstance(values, str):
        values = [values]
    out: list[str] = []
    for value in values:
        if not isinstance(value, str) or not value.strip():
            raise InvalidConfigurationError(f"{what} must be non-empty strings, got {value!r}")
        if value not in out:
            out.append(value)
    return tuple(out)


def _parse_rule_overrides(config: str | Mapping[str, Any]) -> tuple[tuple[str, bool], ...]:
    if isinstance(config, str):
        try:
            config = json.loads(config)
        except json.JSONDecodeError as exc:
            raise InvalidConfigurationError(f"Rule overrides are not valid JSON: {exc}") from exc
    if not isinstance(config, Mapping):
        raise InvalidConfigurationError("Rule overrides must be an object like {'rules': {...}}")

    unknown = set(config) - {"rules"}
    if unknown:
        raise InvalidConfigurationError(f"Unsupported option keys: {', '.join(sorted(unknown))}")
    rules = config.get("rules")
    if not isinstance(rules, Mapping):
        raise InvalidConfigurationError("'rules' must map rule ids to {'enabled': bool}")

    overrides: list[tuple[str, bool]] = []
    for rule_id, setting in rules.items():
        if not isinstance(rule_id, str) or not rule_id:
            raise InvalidConfigurationError(f"Invalid rule id {rule_id!r}")
        if isinstance(setting, Mapping):
            extra = set(setting) - {"enabled"}
            if extra or "enabled" not in setting:
                raise InvalidConfigurationError(f"Rule '{rule_id}' must be {{'enabled': bool}}, got {dict(setting)!r}")
            setting = setting["enabled"]
        if not isinstance(setting, bool):
            raise InvalidConfigurationError(f"Rule '{rule_id}' enabled flag must be a boolean, got {setting!r}")
        overrides.append((rule_id, setting))
    return tuple(overrides)


@dataclass(frozen=True)
class ScanRequest:
    session: BrowserSession
    rule_filter: tuple[str, ...] | None = None
    rule_overrides: tuple[tuple[str, bool], ...] = ()
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    targets: tuple[Any, ...] = ()

    @classmethod
    def for_session(cls, session: BrowserSession) -> "ScanRequest":
        return cls(session=session)

    def with_rule_filter(self, rule_ids: Iterable[str]) -> "ScanRequest":
        ids = _string_list(rule_ids, "Rule ids")
        if not ids:
            raise InvalidConfigurationError("Rule filter needs at least one rule id")
        return replace(self, rule_filter=ids)

    def with_rule_overrides(self, config: str | Mapping[str, Any]) -> "ScanRequest":
        return replace(self, rule_overrides=_parse_rule_overrides(config))

    def with_include(self, selectors: Iterable[str]) -> "ScanRequest":
        selectors = _string_list(selectors, "Selectors")
        if selectors and self.targets:
            raise ConflictingScopeError("Cannot combine include selectors with explicit target elements")
        return replace(self, include=selectors)

    def with_exclude(self, selectors: Iterable[str]) -> "ScanRequest":
        selectors = _string_list(selectors, "Selectors")
        if selectors and self.targets:
            raise ConflictingScopeError("Cannot combine exclude selectors with explicit target elements")
        return replace(self, exclude=selectors)

    def with_targets(self, elements: Iterable[Any]) -> "ScanRequest":
        elements = tuple(elements)
        if not elements:
            raise InvalidConfigurationError("Explicit targets need at least one element")
        if any(e is None for e in elements):
            raise InvalidConfigurationError("Explicit targets must be element handles, got None")
        if self.include or self.exclude:
            raise ConflictingScopeError("Cannot combine explicit target elements with include/exclude selectors")
        return replace(self, targets=elements)

    @property
    def is_full_page(self) -> bool:
        return not (self.include or self.exclude or self.targets)

    def axe_context(self) -> dict[str, Any] | None:
        """Context argument for ``axe.run``; None scans the whole document."""
        if self.targets:
            return {"include": list(self.targets)}
        if self.is_full_page:
            return None
        context: dict[str, Any] = {}
        if self.include:
            context["include"] = [[s] for s in self.include]
        if self.exclude:
            context["exclude"] = [[s] for s in self.exclude]
        return context

    def axe_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {}
        if self.rule_filter:
            options["runOnly"] = {"type": "rule", "values": list(self.rule_filter)}
        if self.rule_overrides:
            options["rules"] = {rule_id: {"enabled": enabled} for rule_id, enabled in self.rule_overrides}
        return options
