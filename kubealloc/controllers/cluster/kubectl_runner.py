"""kubectl subprocess runner used by the cluster fetchers."""

from __future__ import annotations

import asyncio
import logging
import math
import subprocess
from contextlib import suppress

from kubealloc.constants.timeouts import (
    KUBECTL_COMMAND_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT_GRACE,
)
from kubealloc.errors import InventoryFetchError
from kubealloc.utils.duration import parse_duration_seconds

logger = logging.getLogger(__name__)


class KubectlRunner:
    """Runs kubectl commands off the event loop.

    Non-zero exits, timeouts and a missing kubectl binary all surface as
    InventoryFetchError with kubectl's own message.
    """

    def __init__(
        self,
        context: str | None = None,
        kubeconfig: str | None = None,
        kubectl_binary: str = "kubectl",
    ) -> None:
        self.context = context
        self.kubeconfig = kubeconfig
        self.kubectl_binary = kubectl_binary

    def build_command(self, args: tuple[str, ...]) -> list[str]:
        """Prefix ``args`` with the kubectl binary and connection flags."""
        cmd = [self.kubectl_binary]
        if self.kubeconfig:
            cmd.extend(["--kubeconfig", self.kubeconfig])
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        return cmd

    @staticmethod
    def _request_timeout_seconds(args: tuple[str, ...]) -> int | None:
        """Parse kubectl --request-timeout value (seconds) from args."""
        prefix = "--request-timeout="
        for part in args:
            if not part.startswith(prefix):
                continue
            with suppress(ValueError):
                seconds = parse_duration_seconds(part[len(prefix):])
                if seconds > 0:
                    return max(1, math.ceil(seconds))
        return None

    def timeout_for_args(self, args: tuple[str, ...]) -> int:
        """Choose a process timeout that outlives kubectl's request timeout."""
        request_timeout_seconds = self._request_timeout_seconds(args)
        if request_timeout_seconds is None:
            return KUBECTL_COMMAND_TIMEOUT
        return request_timeout_seconds + KUBECTL_COMMAND_TIMEOUT_GRACE

    def run_sync(self, args: tuple[str, ...], timeout: int | None = None) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = self.build_command(args)
        effective_timeout = timeout if timeout is not None else self.timeout_for_args(args)
        logger.debug("Running %s (timeout %ss)", " ".join(cmd), effective_timeout)
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=effective_timeout
            )
        except FileNotFoundError as exc:
            raise InventoryFetchError(
                f"{self.kubectl_binary} not found; install kubectl or fix PATH"
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise InventoryFetchError(
                f"kubectl {' '.join(args[:2])} timed out after {effective_timeout}s"
            ) from exc
        except UnicodeDecodeError as exc:
            raise InventoryFetchError(
                f"kubectl returned undecodable output: {exc}"
            ) from exc
        except OSError as exc:
            raise InventoryFetchError(f"could not run kubectl: {exc}") from exc

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise InventoryFetchError(stderr or "kubectl command failed")
        return result.stdout

    async def run(self, args: tuple[str, ...]) -> str:
        """Run a kubectl command in a worker thread."""
        return await asyncio.to_thread(self.run_sync, args)
