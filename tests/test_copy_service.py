"""Tests for copying configured files into worktrees"""
import os
import stat

from sproutee.config import CopyConfig
from sproutee.services.copy_service import CopyReport, CopyResult, copy_file, copy_files_from_config


class TestCopyFile:

    def test_copies_content_and_mode(self, temp_dir):
        src = temp_dir / "script.sh"
        src.write_text("#!/bin/sh\necho hi\n")
        src.chmod(0o750)
        dst = temp_dir / "out" / "nested" / "script.sh"

        copy_file(str(src), str(dst))

        assert dst.read_text() == "#!/bin/sh\necho hi\n"
        if os.name == "posix":
            assert stat.S_IMODE(dst.stat().st_mode) == 0o750


class TestCopyFilesFromConfig:

    def test_copies_with_structure(self, temp_dir):
        src_root = temp_dir / "src"
        (src_root / ".vscode").mkdir(parents=True)
        (src_root / ".env").write_text("SECRET=1\n")
        (src_root / ".vscode" / "settings.json").write_text("{}")
        target_root = temp_dir / "target"
        target_root.mkdir()

        report = copy_files_from_config(
            str(src_root), str(target_root), CopyConfig(copy_files=[".env", ".vscode/settings.json"])
        )

        assert report.total_files == 2
        assert report.success_count == 2
        assert report.failure_count == 0
        assert (target_root / ".env").read_text() == "SECRET=1\n"
        assert (target_root / ".vscode" / "settings.json").exists()

    def test_missing_source_is_reported(self, temp_dir):
        src_root = temp_dir / "src"
        src_root.mkdir()
        (src_root / ".env").write_text("A=1\n")

        report = copy_files_from_config(
            str(src_root), str(temp_dir / "target"), CopyConfig(copy_files=[".env", "missing.txt"])
        )

        assert report.success_count == 1
        assert report.failure_count == 1
        assert "source file does not exist" in report.failed[0].error
        assert report.failed[0].source_path.endswith("missing.txt")

    def test_directory_entry_is_not_copied(self, temp_dir):
        src_root = temp_dir / "src"
        (src_root / "config").mkdir(parents=True)

        report = copy_files_from_config(str(src_root), str(temp_dir / "t"), CopyConfig(copy_files=["config"]))

        assert report.failure_count == 1

    def test_empty_config(self, temp_dir):
        report = copy_files_from_config(str(temp_dir), str(temp_dir), CopyConfig())
        assert report.total_files == 0


class TestCopyReport:

    def test_add_result_counts(self):
        report = CopyReport()
        report.add_result(CopyResult("a", "b", True))
        report.add_result(CopyResult("c", "d", False, "boom"))
        report.add_result(CopyResult("e", "f", True))

        assert report.total_files == 3
        assert report.success_count == 2
        assert report.failure_count == 1
        assert [r.source_path for r in report.succeeded] == ["a", "e"]
