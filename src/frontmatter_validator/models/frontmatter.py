from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Scalar:
    value: str


@dataclass(frozen=True)
class ListValue:
    items: tuple[str, ...] = ()


FieldValue = Scalar | ListValue


@dataclass(frozen=True)
class FrontmatterRecord(Mapping[str, FieldValue]):
    """Parsed frontmatter block, keyed by field name in order of first appearance."""

    fields: dict[str, FieldValue] = field(default_factory=dict)

    def __getitem__(self, key: str) -> FieldValue:
        return self.fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def scalar(self, key: str) -> str | None:
        value = self.fields.get(key)
        if value is None:
            return None
        if isinstance(value, Scalar):
            return value.value
        return ", ".join(value.items)

    def to_plain(self) -> dict[str, str | list[str]]:
        plain: dict[str, str | list[str]] = {}
        for key, value in self.fields.items():
            if isinstance(value, ListValue):
                plain[key] = list(value.items)
            else:
                plain[key] = value.value
        return plain
