"""Tests for report options and report models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kubealloc.constants.defaults import (
    MAX_CONCURRENT_FETCHES_DEFAULT,
    NODE_SELECTOR_DEFAULT,
)
from kubealloc.constants.enums import OutputFormat
from kubealloc.constants.limits import MAX_CONCURRENT_FETCHES_MAX
from kubealloc.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from kubealloc.models.core.allocated_resources import NodeAllocatedResources
from kubealloc.models.state.options import AllocatedResourcesOptions


class TestAllocatedResourcesOptions:
    """Tests for AllocatedResourcesOptions model."""

    def test_defaults(self) -> None:
        """Test default option values."""
        options = AllocatedResourcesOptions()

        assert options.label_selector == NODE_SELECTOR_DEFAULT
        assert options.group_by_instance_type is False
        assert options.include_node_details is False
        assert options.output_format == OutputFormat.JSON
        assert options.context is None
        assert options.kubeconfig is None
        assert options.request_timeout == CLUSTER_REQUEST_TIMEOUT
        assert options.max_concurrent_fetches == MAX_CONCURRENT_FETCHES_DEFAULT

    def test_options_are_immutable(self) -> None:
        """Test options cannot be mutated after construction."""
        options = AllocatedResourcesOptions()
        with pytest.raises(ValidationError):
            options.group_by_instance_type = True  # type: ignore[misc]

    def test_output_format_from_string(self) -> None:
        """Test output format accepts its string value."""
        options = AllocatedResourcesOptions(output_format="yaml")
        assert options.output_format == OutputFormat.YAML

    @pytest.mark.parametrize(
        "timeout", ["30s", "500ms", "2m", "1h", "45", "1m30s", "1h2m3.5s", "0"]
    )
    def test_valid_request_timeouts(self, timeout: str) -> None:
        """Test kubectl duration formats are accepted."""
        assert AllocatedResourcesOptions(request_timeout=timeout).request_timeout == timeout

    @pytest.mark.parametrize("timeout", ["", "soon", "30 s", "-5s"])
    def test_invalid_request_timeouts(self, timeout: str) -> None:
        """Test malformed durations are rejected."""
        with pytest.raises(ValidationError):
            AllocatedResourcesOptions(request_timeout=timeout)

    @pytest.mark.parametrize("value", [0, -1, MAX_CONCURRENT_FETCHES_MAX + 1])
    def test_invalid_max_concurrent_fetches(self, value: int) -> None:
        """Test concurrency outside the allowed range is rejected."""
        with pytest.raises(ValidationError):
            AllocatedResourcesOptions(max_concurrent_fetches=value)


class TestNodeAllocatedResources:
    """Tests for NodeAllocatedResources model."""

    def test_defaults_are_zero(self) -> None:
        """Test an empty entry is all zeros."""
        entry = NodeAllocatedResources()
        assert entry.node_count == 0
        assert entry.cpu_requests_percentage == 0.0
        assert entry.labels == {}

    def test_populate_by_alias_and_name(self) -> None:
        """Test construction by field name or camelCase alias."""
        by_name = NodeAllocatedResources(cpu_requests=5)
        by_alias = NodeAllocatedResources.model_validate({"cpuRequests": 5})
        assert by_name.cpu_requests == by_alias.cpu_requests == 5

    def test_labels_never_dumped(self) -> None:
        """Test labels are excluded from serialization."""
        entry = NodeAllocatedResources(labels={"a": "b"})
        assert "labels" not in entry.model_dump(by_alias=True)
