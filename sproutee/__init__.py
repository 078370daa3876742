"""
sproutee - create Git worktrees with your untracked setup files, and clean them up safely
"""

from .__version__ import __version__
from .core import WorktreeManager, run_clean_workflow, list_analyzed
from .cli.main import main

__all__ = ["WorktreeManager", "run_clean_workflow", "list_analyzed", "main", "__version__"]
