"""
Data schemas for n8n workflow payloads.
"""

from typing import Any, TypedDict


class LowCodeProject(TypedDict, total=False):
    """Workflow definition as exported by n8n, keys kept in n8n's casing."""

    id: str
    name: str
    active: bool
    createdAt: str
    updatedAt: str
    nodes: list[Any]
    connections: Any
    settings: Any
    staticData: Any
    meta: Any
    pinData: Any
    versionId: str
    triggerCount: int
    shared: list[Any]
    tags: list[Any]
