"""Copies configured files from the main checkout into new worktrees."""

import os
import shutil
from dataclasses import dataclass, field
from typing import List, Optional

from sproutee.config import CopyConfig
from sproutee.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class CopyResult:
    """Outcome of copying a single configured file."""
    source_path: str
    target_path: str
    success: bool
    error: Optional[str] = None


@dataclass
class CopyReport:
    """Aggregated results of one copy run."""
    results: List[CopyResult] = field(default_factory=list)
    total_files: int = 0
    success_count: int = 0
    failure_count: int = 0

    def add_result(self, result: CopyResult) -> None:
        self.results.append(result)
        self.total_files += 1
        if result.success:
            self.success_count += 1
        else:
            self.failure_count += 1

    @property
    def succeeded(self) -> List[CopyResult]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> List[CopyResult]:
        return [r for r in self.results if not r.success]


def copy_file(src: str, dst: str) -> None:
    """Copy file content and permission bits, creating parent directories."""
    os.makedirs(os.path.dirname(dst) or ".", exist_ok=True)
    shutil.copyfile(src, dst)
    shutil.copymode(src, dst)


def copy_files_from_config(src_root: str, target_root: str, copy_config: CopyConfig) -> CopyReport:
    """Copy every path listed in copy_config from src_root to target_root.

    Paths are relative to the roots and keep their directory structure.
    Individual failures are recorded in the report, never raised.
    """
    report = CopyReport()

    for relative_path in copy_config.copy_files or []:
        source_path = os.path.join(src_root, relative_path)
        target_path = os.path.join(target_root, relative_path)

        if not os.path.isfile(source_path):
            error = f"source file does not exist: {source_path}"
            logger.debug(error)
            report.add_result(CopyResult(source_path, target_path, False, error))
            continue

        try:
            copy_file(source_path, target_path)
        except OSError as e:
            logger.debug(f"Failed to copy {source_path} to {target_path}: {e}")
            report.add_result(CopyResult(source_path, target_path, False, str(e)))
            continue

        logger.debug(f"Copied {source_path} -> {target_path}")
        report.add_result(CopyResult(source_path, target_path, True))

    return report
