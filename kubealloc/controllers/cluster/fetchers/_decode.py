"""Shared decoding of kubectl list output."""

from __future__ import annotations

import json
import logging
from typing import Any

from kubealloc.errors import InventoryFetchError

logger = logging.getLogger(__name__)


def decode_list_items(output: str, kind: str) -> list[dict[str, Any]]:
    """Decode ``kubectl get ... -o json`` output into its ``items``.

    Raises:
        InventoryFetchError: If the output is not a JSON list object.
    """
    if not output or not output.strip():
        return []
    try:
        data = json.loads(output)
    except json.JSONDecodeError as exc:
        logger.debug("Unparseable %s output: %.200s", kind, output)
        raise InventoryFetchError(f"could not decode {kind} list: {exc}") from exc
    if not isinstance(data, dict):
        raise InventoryFetchError(f"unexpected {kind} list payload: {type(data).__name__}")
    items = data.get("items") or []
    if not isinstance(items, list):
        raise InventoryFetchError(f"unexpected {kind} items payload: {type(items).__name__}")
    return items
