"""Canonical record normalization for structJSON payloads.

Architectural role:
    Repairs non-standard escapes emitted by the web services' JSON encoder and
    reshapes the subject/predicate wire structure into one map per subject.

Wire shape (as received):
    {"prefixes": {...},
     "resultset": {"subject": [
         {"uri": "...", "type": "...",
          "predicate": [{"p1": "a"}, {"p1": "b"}, {"p2": {"uri": "..."}}]}]}}

Canonical shape (as returned):
    Same envelope, but each `predicate` is a dict of predicate -> list of
    values, in first-seen order: {"p1": ["a", "b"], "p2": [{"uri": "..."}]}.

Value forms:
    - literal string: "text"
    - typed literal: {"value": "0", "type": "xsd:integer"}
    - reference: {"uri": "...", "reify": [{"type": "...", "value": "..."}]}
"""

import re
from dataclasses import dataclass, field

# An 8-hex-digit `\U` escape not itself preceded by an escaping backslash.
_UTF32_ESCAPE = re.compile(r"(?<!\\)((?:\\\\)*)\\U([0-9A-F]{8})")

_MAX_CODEPOINT = 0x10FFFF


def _utf16_escape(codepoint: int) -> str:
    if codepoint > _MAX_CODEPOINT:
        raise ValueError(f"invalid unicode escape: U+{codepoint:08X}")
    if codepoint <= 0xFFFF:
        return "\\u%04X" % codepoint
    offset = codepoint - 0x10000
    high = 0xD800 + (offset >> 10)
    low = 0xDC00 + (offset & 0x3FF)
    return "\\u%04X\\u%04X" % (high, low)


def fix_json_utf32(text: str) -> str:
    """Rewrite `\\UXXXXXXXX` escapes as standard `\\uXXXX` surrogate pairs.

    Text without such escapes is returned unchanged, so repeated application
    is a no-op.

    Raises:
        ValueError: when an escape names a value above U+10FFFF.
    """
    def replace(match):
        return match.group(1) + _utf16_escape(int(match.group(2), 16))

    return _UTF32_ESCAPE.sub(replace, text)


def merge_predicates(entries) -> dict:
    """Union single-entry predicate maps into predicate -> ordered values."""
    merged = {}
    for entry in entries:
        for predicate, value in entry.items():
            merged.setdefault(predicate, []).append(value)
    return merged


def _reshape_subject(subject):
    if not isinstance(subject, dict):
        return subject
    predicates = subject.get("predicate")
    if not isinstance(predicates, list):
        return subject
    reshaped = dict(subject)
    reshaped["predicate"] = merge_predicates(predicates)
    return reshaped


def internalize(payload):
    """Reshape a parsed structJSON payload into canonical records.

    Payloads without a `prefixes` envelope are returned unchanged.
    """
    if not isinstance(payload, dict) or "prefixes" not in payload:
        return payload

    resultset = dict(payload.get("resultset") or {})
    resultset["subject"] = [
        _reshape_subject(subject) for subject in resultset.get("subject") or []
    ]
    normalized = dict(payload)
    normalized["resultset"] = resultset
    return normalized


def to_wire(payload):
    """Inverse of `internalize`: one single-entry map per predicate value."""
    if not isinstance(payload, dict) or "prefixes" not in payload:
        return payload

    subjects = []
    for subject in (payload.get("resultset") or {}).get("subject") or []:
        predicates = subject.get("predicate") if isinstance(subject, dict) else None
        if isinstance(predicates, dict):
            subject = dict(subject)
            subject["predicate"] = [
                {predicate: value}
                for predicate, values in predicates.items()
                for value in values
            ]
        subjects.append(subject)

    resultset = dict(payload.get("resultset") or {})
    resultset["subject"] = subjects
    wire = dict(payload)
    wire["resultset"] = resultset
    return wire


# ============================================================
# Typed view
# ============================================================

@dataclass(frozen=True)
class TypedLiteral:
    value: str
    datatype: str | None = None


@dataclass(frozen=True)
class Reference:
    """Link to another record, with optional reification statements."""

    uri: str
    reify: list = field(default_factory=list)


@dataclass(frozen=True)
class Subject:
    uri: str
    type: str | None = None
    predicates: dict = field(default_factory=dict)

    def values(self, predicate: str) -> list:
        return self.predicates.get(predicate, [])


def parse_value(value):
    if isinstance(value, dict):
        if "uri" in value:
            return Reference(uri=value["uri"], reify=list(value.get("reify") or []))
        if "value" in value:
            return TypedLiteral(value=value["value"], datatype=value.get("type"))
    return value


def subjects(payload) -> list[Subject]:
    """Build typed `Subject` objects from a canonical payload."""
    result = []
    for subject in (payload.get("resultset") or {}).get("subject") or []:
        predicates = subject.get("predicate")
        if isinstance(predicates, list):
            predicates = merge_predicates(predicates)
        result.append(
            Subject(
                uri=subject.get("uri"),
                type=subject.get("type"),
                predicates={
                    predicate: [parse_value(v) for v in values]
                    for predicate, values in (predicates or {}).items()
                },
            )
        )
    return result
