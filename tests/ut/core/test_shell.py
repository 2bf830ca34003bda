"""shell.py 执行器 / run_cmd 单元测试"""

from __future__ import annotations

import os
import sys

import pytest

from wgo.core.exceptions import SubprocessFailureError
from wgo.utils.shell import (
    CommandResult,
    LocalExecutor,
    get_executor,
    run_cmd,
    set_executor,
)


class TestLocalExecutor:
    def test_captures_output(self, tmp_path) -> None:
        r = LocalExecutor().execute(
            [sys.executable, "-c", "import sys; print('out'); print('err', file=sys.stderr)"],
            cwd=str(tmp_path),
        )
        assert r.success
        assert r.stdout.strip() == "out"
        assert r.stderr.strip() == "err"

    def test_env_passed_explicitly(self, tmp_path) -> None:
        env = {**os.environ, "WGO_TEST_VAR": "42"}
        r = LocalExecutor().execute(
            [sys.executable, "-c", "import os; print(os.environ['WGO_TEST_VAR'])"],
            cwd=str(tmp_path), env=env,
        )
        assert r.stdout.strip() == "42"
        assert "WGO_TEST_VAR" not in os.environ

    def test_missing_executable_raises_oserror(self, tmp_path) -> None:
        with pytest.raises(OSError):
            LocalExecutor().execute(["wgo-definitely-not-installed"], cwd=str(tmp_path))


class TestRunCmd:
    def test_success(self, tmp_path) -> None:
        r = run_cmd([sys.executable, "-c", "print('hello')"], cwd=str(tmp_path))
        assert r.returncode == 0
        assert "hello" in r.stdout

    def test_failure_raises_with_exit_code(self, tmp_path) -> None:
        with pytest.raises(SubprocessFailureError, match="rc=4") as info:
            run_cmd([sys.executable, "-c", "import sys; sys.exit(4)"], cwd=str(tmp_path))
        assert info.value.exit_code == 4

    def test_stderr_in_message(self, make_executor) -> None:
        ex = make_executor({("go",): CommandResult(1, "", "cannot find package")})
        with pytest.raises(SubprocessFailureError, match="cannot find package"):
            run_cmd(["go", "list"], executor=ex)

    def test_global_executor_replaceable(self, make_executor) -> None:
        fake = make_executor()
        original = get_executor()
        set_executor(fake)
        try:
            run_cmd(["go", "env", "GOROOT"])
        finally:
            set_executor(original)
        assert fake.calls[0]["cmd"] == ["go", "env", "GOROOT"]

    def test_missing_executable_becomes_failure(self, tmp_path) -> None:
        with pytest.raises(SubprocessFailureError, match="rc=127") as info:
            run_cmd(["wgo-definitely-not-installed", "list"], cwd=str(tmp_path))
        assert info.value.exit_code == 127
        assert info.value.command == ["wgo-definitely-not-installed", "list"]
        assert isinstance(info.value.__cause__, OSError)

    def test_executor_oserror_becomes_failure(self, make_executor) -> None:
        ex = make_executor({("go",): PermissionError("go: permission denied")})
        with pytest.raises(SubprocessFailureError, match="permission denied"):
            run_cmd(["go", "env", "GOROOT"], executor=ex)
