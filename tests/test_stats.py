import threading

import pytest

from falcorules.indexed import IndexedVector
from falcorules.rule import FalcoRule, Priority, format_priority
from falcorules.stats import StatsManager


def _rules(*specs):
    vec = IndexedVector()
    out = []
    for name, prio in specs:
        rule = FalcoRule(name=name, priority=prio)
        rule.id = vec.insert(rule, name)
        out.append(rule)
    return vec, out


def test_event_before_load_raises():
    stats = StatsManager()
    with pytest.raises(IndexError):
        stats.on_event(FalcoRule(name="x"))


def test_format_lists_only_triggered_rules():
    vec, (a, b) = _rules(("rule a", Priority.WARNING), ("rule b", Priority.ERROR))
    stats = StatsManager()
    stats.on_rule_loaded(a)
    stats.on_rule_loaded(b)
    stats.on_event(a)
    stats.on_event(a)
    text = stats.format(vec)
    label = format_priority(Priority.WARNING, short=True).upper()
    assert text == (
        "Events detected: 2\n"
        "Rule counts by severity:\n"
        f"   {label}: 2\n"
        "Triggered rules by rule name:\n"
        "   rule a: 2\n"
    )
    assert "rule b" not in text


def test_total_counts_all_events():
    vec, rules = _rules(("a", Priority.DEBUG), ("b", Priority.ALERT))
    stats = StatsManager()
    for r in rules:
        stats.on_rule_loaded(r)
    for r in rules:
        stats.on_event(r)
    assert stats.total == len(rules)


def test_clear_resets_and_requires_reload():
    vec, (a,) = _rules(("a", Priority.NOTICE))
    stats = StatsManager()
    stats.on_rule_loaded(a)
    stats.on_event(a)
    stats.clear()
    assert stats.total == 0
    with pytest.raises(IndexError):
        stats.on_event(a)


def test_empty_format_has_headers_only():
    stats = StatsManager()
    assert stats.format(IndexedVector()) == (
        "Events detected: 0\nRule counts by severity:\nTriggered rules by rule name:\n"
    )


def test_concurrent_events_are_all_counted():
    vec, (a,) = _rules(("a", Priority.CRITICAL))
    stats = StatsManager()
    stats.on_rule_loaded(a)
    per_thread = 200
    threads = [
        threading.Thread(target=lambda: [stats.on_event(a) for _ in range(per_thread)])
        for _ in range(8)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    assert stats.total == per_thread * len(threads)
    assert f"   a: {per_thread * len(threads)}\n" in stats.format(vec)