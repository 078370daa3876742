"""Command-line argument parsing for sproutee."""

import argparse
from typing import List, Optional

from sproutee.__version__ import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sproutee",
        description="A CLI tool for managing Git worktrees efficiently",
        epilog="Worktrees are created in .git/sproutee-worktrees/ and files listed in "
        "sproutee.json are copied into every new worktree.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"sproutee {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    create = subparsers.add_parser(
        "create",
        help="Create a new worktree with file copying",
        description="Create a new Git worktree with the specified name. The name is used as "
        "both the worktree directory name and the branch name. Files specified in the "
        "configuration are copied to the new worktree.",
    )
    create.add_argument("name", help="Worktree and branch name")
    editors = create.add_mutually_exclusive_group()
    editors.add_argument(
        "--cursor", dest="editor", action="store_const", const="cursor",
        help="Open the created worktree in Cursor",
    )
    editors.add_argument(
        "--vscode", dest="editor", action="store_const", const="vscode",
        help="Open the created worktree in VS Code",
    )
    editors.add_argument(
        "--xcode", dest="editor", action="store_const", const="xcode",
        help="Open the created worktree in Xcode (macOS only)",
    )
    editors.add_argument(
        "--android-studio", dest="editor", action="store_const", const="android-studio",
        help="Open the created worktree in Android Studio",
    )
    create.add_argument(
        "--dir",
        dest="target_dir",
        metavar="DIR",
        help="Directory to open in the editor (absolute, or relative to the worktree)",
    )

    subparsers.add_parser(
        "list",
        help="List existing worktrees",
        description="Display all existing worktrees of the repository.",
    )

    clean = subparsers.add_parser(
        "clean",
        help="Clean up worktrees",
        description="Remove unused worktrees. Interactive selection with safety checks "
        "for uncommitted changes.",
    )
    clean.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be deleted without actually deleting",
    )
    clean.add_argument(
        "--force",
        action="store_true",
        help="Delete worktrees with uncommitted changes without confirmation",
    )

    config = subparsers.add_parser(
        "config",
        help="Configuration management commands",
        description="Manage sproutee configuration files and settings.",
    )
    config_commands = config.add_subparsers(dest="config_command", metavar="<subcommand>")
    config_commands.add_parser("init", help="Create a default sproutee.json in the current directory")
    config_commands.add_parser("list", help="Show configuration")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    return build_parser().parse_args(argv)
