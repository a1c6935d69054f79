"""Counters of rule matches by rule and by priority."""

from __future__ import annotations

import threading

from falcorules.indexed import IndexedVector
from falcorules.rule import FalcoRule, Priority, format_priority


class StatsManager:
    """Collects match statistics; on_event may be called from many threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._total = 0
        self._by_rule_id: list[int] = []
        self._by_priority: list[int] = []

    def clear(self) -> None:
        """Reset all counters."""
        with self._lock:
            self._total = 0
            self._by_rule_id = []
            self._by_priority = []

    def on_rule_loaded(self, rule: FalcoRule) -> None:
        """Make room for counting matches of ``rule``."""
        with self._lock:
            missing = rule.id + 1 - len(self._by_rule_id)
            self._by_rule_id.extend([0] * max(missing, 0))
            missing = int(rule.priority) + 1 - len(self._by_priority)
            self._by_priority.extend([0] * max(missing, 0))

    def on_event(self, rule: FalcoRule) -> None:
        """Count one match of ``rule``.

        Raises IndexError if the rule was not passed to on_rule_loaded first.
        """
        with self._lock:
            if rule.id >= len(self._by_rule_id) or int(rule.priority) >= len(
                self._by_priority
            ):
                raise IndexError("rule id or priority out of bounds")
            self._total += 1
            self._by_rule_id[rule.id] += 1
            self._by_priority[int(rule.priority)] += 1

    @property
    def total(self) -> int:
        """Number of events counted so far."""
        return self._total

    def format(self, rules: IndexedVector[FalcoRule]) -> str:
        """Render the statistics as human-readable text."""
        lines = [f"Events detected: {self._total}", "Rule counts by severity:"]
        for prio, count in enumerate(self._by_priority):
            if count > 0:
                label = format_priority(Priority(prio), short=True).upper()
                lines.append(f"   {label}: {count}")
        lines.append("Triggered rules by rule name:")
        for rule_id, count in enumerate(self._by_rule_id):
            if count > 0:
                rule = rules.at(rule_id)
                lines.append(f"   {rule.name}: {count}")
        return "\n".join(lines) + "\n"