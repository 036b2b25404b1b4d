from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from vendor_patch.engines import GitApplyEngine, GnuPatchEngine, get_engine
from vendor_patch.utils.commands import CommandResult, run_command


class TestGitApplyEngine:
    def test_commands(self, tmp_path: Path) -> None:
        engine = GitApplyEngine()
        patch_file = tmp_path / "0001.patch"

        assert engine.build_command(tmp_path, patch_file, dry_run=True, reverse=False) == [
            "git", "-C", str(tmp_path), "apply", "--check", str(patch_file.resolve()),
        ]
        assert engine.build_command(tmp_path, patch_file, dry_run=False, reverse=False) == [
            "git", "-C", str(tmp_path), "apply", str(patch_file.resolve()),
        ]
        assert engine.build_command(tmp_path, patch_file, dry_run=True, reverse=True) == [
            "git", "-C", str(tmp_path), "apply", "--reverse", "--check", str(patch_file.resolve()),
        ]

    def test_relative_patch_path_is_resolved(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)

        cmd = GitApplyEngine().build_command(Path("lib/dep"), Path("patches/dep/0001.patch"), dry_run=True, reverse=False)

        assert cmd[-1] == str(tmp_path.resolve() / "patches" / "dep" / "0001.patch")

    def test_failure_carries_output(self, tmp_path: Path) -> None:
        failed = CommandResult(args=[], returncode=1, stderr="error: patch failed: hello.txt:1\n")
        with patch("vendor_patch.base_engine.run_command", return_value=failed) as run:
            result = GitApplyEngine().check_apply(tmp_path, tmp_path / "0001.patch")

        assert result.success is False
        assert result.detail == "error: patch failed: hello.txt:1"
        run.assert_called_once()

    def test_missing_executable_is_a_failed_result(self, tmp_path: Path) -> None:
        engine = GitApplyEngine(git=str(tmp_path / "no-such-git"))

        result = engine.check_reverse_apply(tmp_path, tmp_path / "0001.patch")

        assert result.success is False
        assert "no-such-git" in result.detail


class TestGnuPatchEngine:
    def test_commands(self, tmp_path: Path) -> None:
        engine = GnuPatchEngine()
        patch_file = tmp_path / "0001.patch"

        cmd = engine.build_command(tmp_path, patch_file, dry_run=True, reverse=True)

        assert cmd[:4] == ["patch", "-d", str(tmp_path), "-p1"]
        assert "--fuzz=0" in cmd
        assert "--reverse" in cmd
        assert "--dry-run" in cmd
        assert cmd[-2:] == ["-i", str(patch_file.resolve())]

    def test_real_apply_has_no_dry_run(self, tmp_path: Path) -> None:
        cmd = GnuPatchEngine(strip=0).build_command(tmp_path, tmp_path / "x.patch", dry_run=False, reverse=False)

        assert "-p0" in cmd
        assert "--dry-run" not in cmd
        assert "--reverse" not in cmd


class TestGetEngine:
    def test_known_engines(self) -> None:
        assert isinstance(get_engine("git"), GitApplyEngine)
        assert isinstance(get_engine("patch"), GnuPatchEngine)

    def test_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown engine"):
            get_engine("svn")


class TestRunCommand:
    def test_captures_output(self) -> None:
        completed = MagicMock(returncode=0, stdout="out\n", stderr="")
        with patch("vendor_patch.utils.commands.subprocess.run", return_value=completed) as run:
            result = run_command(["git", "--version"])

        assert result.ok
        assert result.output == "out"
        assert run.call_args.kwargs["check"] is False

    def test_os_error_becomes_result(self) -> None:
        with patch("vendor_patch.utils.commands.subprocess.run", side_effect=FileNotFoundError("not found")):
            result = run_command(["git", "apply"])

        assert result.returncode == 127
        assert not result.ok
        assert result.output == "git: not found"

    def test_silent_failure_has_no_output(self) -> None:
        assert CommandResult(args=["x"], returncode=1).output is None
