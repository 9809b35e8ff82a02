"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest

from kubealloc.constants.labels import INSTANCE_TYPE_LABEL


def _node_item(
    name: str,
    *,
    cpu: str | None = "4",
    memory: str | None = "8Gi",
    pods: str | None = "110",
    instance_type: str | None = None,
    labels: dict[str, str] | None = None,
) -> dict[str, Any]:
    node_labels = dict(labels or {})
    if instance_type is not None:
        node_labels[INSTANCE_TYPE_LABEL] = instance_type
    capacity = {
        key: value
        for key, value in (("cpu", cpu), ("memory", memory), ("pods", pods))
        if value is not None
    }
    return {
        "metadata": {"name": name, "labels": node_labels},
        "status": {"capacity": capacity, "allocatable": capacity},
    }


def _pod_item(
    name: str,
    node_name: str,
    containers: list[dict[str, dict[str, str]]] | None = None,
    *,
    namespace: str = "default",
    phase: str = "Running",
    init_containers: list[dict[str, dict[str, str]]] | None = None,
) -> dict[str, Any]:
    def _container(index: int, resources: dict[str, dict[str, str]]) -> dict[str, Any]:
        return {"name": f"c{index}", "resources": resources}

    return {
        "metadata": {"name": name, "namespace": namespace},
        "spec": {
            "nodeName": node_name,
            "containers": [_container(i, r) for i, r in enumerate(containers or [])],
            "initContainers": [
                _container(i, r) for i, r in enumerate(init_containers or [])
            ],
        },
        "status": {"phase": phase},
    }


@pytest.fixture
def node_item() -> Callable[..., dict[str, Any]]:
    """Factory for raw node dictionaries as kubectl returns them."""
    return _node_item


@pytest.fixture
def pod_item() -> Callable[..., dict[str, Any]]:
    """Factory for raw pod dictionaries as kubectl returns them."""
    return _pod_item


@pytest.fixture
def list_output() -> Callable[[list[dict[str, Any]]], str]:
    """Wrap items into ``kubectl get ... -o json`` output."""

    def _list_output(items: list[dict[str, Any]]) -> str:
        return json.dumps({"apiVersion": "v1", "kind": "List", "items": items})

    return _list_output
