"""FlowSet — records grouped by category, ready to be split into files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from .categories import CATEGORIES, Category

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]+")

# Node types that own the nodes pointing at them through ``z``
_CONTAINER_TYPES = {"tab": Category.TABS, "subflow": Category.SUBFLOWS}


def normalize_name(label: str, fallback: str = "node") -> str:
    """Turn a node label into a filesystem-safe file stem."""
    name = _UNSAFE_CHARS.sub("_", label.strip()).strip("_")
    return name or fallback


@dataclass
class FlowRecord:
    """One file's worth of flow data: a safe name and the payload to write."""

    normalized_name: str
    content: Any

    def to_dict(self) -> dict:
        return {"normalizedName": self.normalized_name, "content": self.content}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FlowRecord:
        return cls(normalized_name=data["normalizedName"], content=data["content"])


@dataclass
class FlowSet:
    """Records keyed by category.

    Only a set holding all three categories can be split; an absent key is
    not the same as an empty list.
    """

    categories: dict[str, list[FlowRecord]] = field(default_factory=dict)
    tabs_order: list[str] = field(default_factory=list)

    @property
    def is_viable(self) -> bool:
        return all(category.value in self.categories for category in CATEGORIES)

    def __getitem__(self, category: Category | str) -> list[FlowRecord]:
        return self.categories[str(category)]

    def __contains__(self, category: object) -> bool:
        return str(category) in self.categories

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FlowSet:
        """Build a FlowSet from ``{category: [{normalizedName, content}, ...]}``."""
        categories = {
            key: [r if isinstance(r, FlowRecord) else FlowRecord.from_dict(r) for r in records]
            for key, records in data.items()
            if key != "tabsOrder"
        }
        return cls(categories=categories, tabs_order=list(data.get("tabsOrder", [])))

    @classmethod
    def from_flows(cls, flows: list[dict]) -> FlowSet:
        """Classify a flat flows array.

        Each tab and subflow becomes one record holding the container node
        followed by its member nodes. Every other node becomes its own
        config-node record.
        """
        containers: dict[str, list[dict]] = {}
        owners: dict[str, Category] = {}
        tabs_order: list[str] = []
        for node in flows:
            category = _CONTAINER_TYPES.get(node.get("type"))
            if category is not None and "id" in node:
                containers[node["id"]] = [node]
                owners[node["id"]] = category
                tabs_order.append(node["id"])

        loose: list[dict] = []
        for node in flows:
            if node.get("id") in containers:
                continue
            parent = node.get("z")
            if parent in containers:
                containers[parent].append(node)
            else:
                loose.append(node)

        categories: dict[str, list[FlowRecord]] = {c.value: [] for c in CATEGORIES}
        used: dict[str, set[str]] = {c.value: set() for c in CATEGORIES}

        def add(category: Category, head: dict, content: Any) -> None:
            label = head.get("label") or head.get("name") or head.get("type") or ""
            base = normalize_name(str(label))
            name = base
            if name in used[category]:
                suffix = normalize_name(str(head.get("id", "")), fallback=str(len(used[category])))
                name = f"{base}_{suffix}"
                counter = 2
                while name in used[category]:
                    name = f"{base}_{suffix}_{counter}"
                    counter += 1
            used[category].add(name)
            categories[category].append(FlowRecord(normalized_name=name, content=content))

        for node_id, nodes in containers.items():
            add(owners[node_id], nodes[0], nodes)
        for node in loose:
            add(Category.CONFIG_NODES, node, node)

        return cls(categories=categories, tabs_order=tabs_order)
