"""Command-line interface for sproutee"""

import argparse
import os
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from sproutee.config import (
    Config,
    create_default_config_file,
    load_config_from_dir,
)
from sproutee.constants import CONFIG_FILE_NAME, EDITOR_NAMES, SYMBOL_FOLDER, SYMBOL_LAUNCH, SYMBOL_OK
from sproutee.core.clean import run_clean_workflow
from sproutee.core.manager import WorktreeManager
from sproutee.exceptions import ConfigError, EditorLaunchError, SprouteeError
from sproutee.services.copy_service import copy_files_from_config
from sproutee.services.display_service import DisplayService
from sproutee.services.editor_service import open_in_editor, resolve_target_path
from sproutee.services.git import find_git_repository
from sproutee.utils.logging import get_logger, setup_logging
from .args import build_parser

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)
logger = get_logger(__name__)


def cmd_create(args: argparse.Namespace, config: Config) -> int:
    manager = WorktreeManager.from_cwd()
    name = args.name

    console.print(f"Creating worktree '{escape(name)}' with branch '{escape(name)}'...")
    worktree_path = manager.create_worktree(name)
    console.print(f"{SYMBOL_OK} Worktree created successfully at: {escape(worktree_path)}")

    console.print(f"\n{SYMBOL_FOLDER} Copying configured files...")
    display = DisplayService(console, verbose=config.verbose)
    try:
        copy_config = load_config_from_dir()
    except ConfigError as e:
        err_console.print(f"[yellow]Warning: Failed to copy files: {escape(str(e))}[/yellow]")
    else:
        display.display_copy_report(copy_files_from_config(manager.repo_root, worktree_path, copy_config))

    if config.editor:
        editor_name = EDITOR_NAMES[config.editor]
        target_path, missing_dir = resolve_target_path(worktree_path, config.target_dir)
        if missing_dir:
            console.print(
                f"[yellow]Warning: Directory '{escape(missing_dir)}' does not exist, "
                "using worktree root instead[/yellow]"
            )

        console.print(f"\n{SYMBOL_LAUNCH} Opening {editor_name}...")
        if config.target_dir:
            console.print(f"{SYMBOL_FOLDER} Target directory: {escape(target_path)}")
        try:
            open_in_editor(target_path, config.editor)
        except EditorLaunchError as e:
            err_console.print(f"[yellow]Warning: {escape(str(e))}[/yellow]")
        else:
            console.print(f"{SYMBOL_OK} {editor_name} opened successfully")

    return 0


def cmd_list(args: argparse.Namespace, config: Config) -> int:
    manager = WorktreeManager.from_cwd()
    DisplayService(console, verbose=config.verbose).display_worktree_list(manager.list_worktrees())
    return 0


def cmd_clean(args: argparse.Namespace, config: Config) -> int:
    repo_root = find_git_repository()
    summary = run_clean_workflow(repo_root, config, console=console)
    logger.info(
        f"Clean finished ({summary.state.value}): {len(summary.deleted)} deleted, "
        f"{len(summary.skipped)} skipped, {len(summary.failed)} failed"
    )
    # Per-item failures are reported inline and don't change the exit status
    return 0


def cmd_config_init(args: argparse.Namespace, config: Config) -> int:
    config_path = os.path.join(os.getcwd(), CONFIG_FILE_NAME)
    create_default_config_file(config_path)
    console.print(f"Configuration file created: {escape(config_path)}")
    console.print("You can now customize the file to specify which files to copy to new worktrees.")
    return 0


def cmd_config_list(args: argparse.Namespace, config: Config) -> int:
    DisplayService(console, verbose=config.verbose).display_copy_config(load_config_from_dir())
    return 0


def dispatch(args: argparse.Namespace, config: Config) -> int:
    if args.command == "create":
        return cmd_create(args, config)
    if args.command == "list":
        return cmd_list(args, config)
    if args.command == "clean":
        return cmd_clean(args, config)
    if args.command == "config":
        if args.config_command == "init":
            return cmd_config_init(args, config)
        if args.config_command == "list":
            return cmd_config_list(args, config)
        console.print("Use 'sproutee config --help' for available subcommands.")
        return 0

    console.print("Sproutee - Git Worktree Management Tool")
    console.print("Use 'sproutee --help' for more information.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parser = build_parser()
    parsed_args = parser.parse_args(argv)

    try:
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        config = Config(
            dry_run=getattr(parsed_args, "dry_run", False),
            force=getattr(parsed_args, "force", False),
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
            editor=getattr(parsed_args, "editor", None),
            target_dir=getattr(parsed_args, "target_dir", None),
        )

        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        return dispatch(parsed_args, config)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except SprouteeError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args.debug:
            err_console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
