"""Report options model."""

from pydantic import BaseModel, ConfigDict, field_validator

from kubealloc.constants.defaults import (
    GROUP_BY_INSTANCE_TYPE_DEFAULT,
    INCLUDE_NODE_DETAILS_DEFAULT,
    MAX_CONCURRENT_FETCHES_DEFAULT,
    NODE_SELECTOR_DEFAULT,
)
from kubealloc.constants.enums import OutputFormat
from kubealloc.constants.limits import (
    MAX_CONCURRENT_FETCHES_MAX,
    MAX_CONCURRENT_FETCHES_MIN,
)
from kubealloc.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from kubealloc.utils.duration import parse_duration_seconds


class AllocatedResourcesOptions(BaseModel):
    """Immutable options for one report run."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Node filtering
    label_selector: str = NODE_SELECTOR_DEFAULT

    # Report shape
    group_by_instance_type: bool = GROUP_BY_INSTANCE_TYPE_DEFAULT
    include_node_details: bool = INCLUDE_NODE_DETAILS_DEFAULT
    output_format: OutputFormat = OutputFormat.JSON

    # Cluster access
    context: str | None = None
    kubeconfig: str | None = None
    request_timeout: str = CLUSTER_REQUEST_TIMEOUT
    max_concurrent_fetches: int = MAX_CONCURRENT_FETCHES_DEFAULT

    @field_validator("request_timeout")
    @classmethod
    def _check_request_timeout(cls, value: str) -> str:
        value = value.strip()
        try:
            parse_duration_seconds(value)
        except ValueError as exc:
            raise ValueError(
                f"request timeout must be a duration like 30s, 1m30s, 500ms or 1h, "
                f"got {value!r}"
            ) from exc
        return value

    @field_validator("max_concurrent_fetches")
    @classmethod
    def _check_max_concurrent_fetches(cls, value: int) -> int:
        if not MAX_CONCURRENT_FETCHES_MIN <= value <= MAX_CONCURRENT_FETCHES_MAX:
            raise ValueError(
                f"max concurrent fetches must be between {MAX_CONCURRENT_FETCHES_MIN} "
                f"and {MAX_CONCURRENT_FETCHES_MAX}, got {value}"
            )
        return value
