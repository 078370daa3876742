"""Core workflows for sproutee."""

from .manager import WorktreeManager, list_analyzed
from .clean import CleanWorkflow, run_clean_workflow

__all__ = ["WorktreeManager", "list_analyzed", "CleanWorkflow", "run_clean_workflow"]
