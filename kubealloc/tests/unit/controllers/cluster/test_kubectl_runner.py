"""Tests for the kubectl runner."""

from __future__ import annotations

import subprocess
from typing import Any

import pytest

from kubealloc.constants.timeouts import (
    KUBECTL_COMMAND_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT_GRACE,
)
from kubealloc.controllers.cluster.kubectl_runner import KubectlRunner
from kubealloc.errors import InventoryFetchError


class TestKubectlRunner:
    """Tests for KubectlRunner class."""

    def test_build_command_plain(self) -> None:
        """Test command without connection flags."""
        runner = KubectlRunner()
        assert runner.build_command(("get", "nodes")) == ["kubectl", "get", "nodes"]

    def test_build_command_with_context_and_kubeconfig(self) -> None:
        """Test connection flags are placed before the arguments."""
        runner = KubectlRunner(context="prod", kubeconfig="/tmp/kc")
        assert runner.build_command(("get", "nodes")) == [
            "kubectl",
            "--kubeconfig",
            "/tmp/kc",
            "--context",
            "prod",
            "get",
            "nodes",
        ]

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("30s", 30),
            ("45", 45),
            ("2m", 120),
            ("1h", 3600),
            ("1500ms", 2),
            ("1m30s", 90),
        ],
    )
    def test_request_timeout_seconds(self, value: str, expected: int) -> None:
        """Test parsing kubectl durations."""
        args = ("get", "nodes", f"--request-timeout={value}")
        assert KubectlRunner._request_timeout_seconds(args) == expected

    def test_request_timeout_seconds_missing(self) -> None:
        """Test args without a request timeout."""
        assert KubectlRunner._request_timeout_seconds(("get", "nodes")) is None

    def test_request_timeout_seconds_zero(self) -> None:
        """Test a zero request timeout falls back to the default process timeout."""
        runner = KubectlRunner()
        args = ("get", "nodes", "--request-timeout=0")
        assert runner._request_timeout_seconds(args) is None
        assert runner.timeout_for_args(args) == KUBECTL_COMMAND_TIMEOUT

    def test_timeout_for_args(self) -> None:
        """Test process timeout outlives the request timeout."""
        runner = KubectlRunner()
        assert runner.timeout_for_args(("--request-timeout=30s",)) == (
            30 + KUBECTL_COMMAND_TIMEOUT_GRACE
        )
        assert runner.timeout_for_args(("get", "nodes")) == KUBECTL_COMMAND_TIMEOUT

    def test_run_sync_returns_stdout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test successful commands return stdout."""
        calls: list[list[str]] = []

        def fake_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
            calls.append(cmd)
            return subprocess.CompletedProcess(cmd, 0, stdout='{"items": []}', stderr="")

        monkeypatch.setattr(subprocess, "run", fake_run)

        assert KubectlRunner(context="c").run_sync(("get", "nodes")) == '{"items": []}'
        assert calls == [["kubectl", "--context", "c", "get", "nodes"]]

    def test_run_sync_nonzero_exit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test kubectl stderr is surfaced verbatim."""

        def fake_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
            return subprocess.CompletedProcess(
                cmd, 1, stdout="", stderr="error: You must be logged in to the server\n"
            )

        monkeypatch.setattr(subprocess, "run", fake_run)

        with pytest.raises(InventoryFetchError, match="You must be logged in"):
            KubectlRunner().run_sync(("get", "nodes"))

    def test_run_sync_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test process timeouts become InventoryFetchError."""

        def fake_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
            raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

        monkeypatch.setattr(subprocess, "run", fake_run)

        with pytest.raises(InventoryFetchError, match="timed out"):
            KubectlRunner().run_sync(("get", "nodes"), timeout=1)

    def test_run_sync_missing_binary(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a missing kubectl binary becomes InventoryFetchError."""

        def fake_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
            raise FileNotFoundError(cmd[0])

        monkeypatch.setattr(subprocess, "run", fake_run)

        with pytest.raises(InventoryFetchError, match="not found"):
            KubectlRunner(kubectl_binary="kubectl-missing").run_sync(("get", "nodes"))

    def test_run_sync_undecodable_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test output that is not valid UTF-8 becomes InventoryFetchError."""

        def fake_run(cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
            raw = b'\xff\xfe{"items": []}'
            raise UnicodeDecodeError("utf-8", raw, 0, 1, "invalid start byte")

        monkeypatch.setattr(subprocess, "run", fake_run)

        with pytest.raises(InventoryFetchError, match="undecodable output"):
            KubectlRunner().run_sync(("get", "nodes"))

    @pytest.mark.asyncio
    async def test_run_uses_worker_thread(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the async wrapper returns run_sync output."""
        runner = KubectlRunner()
        monkeypatch.setattr(runner, "run_sync", lambda args: "ok:" + ",".join(args))

        assert await runner.run(("get", "nodes")) == "ok:get,nodes"
