#!/usr/bin/env python3
"""
fav-cmd - favorite command lines

Pick a saved command with fzf and print it, so a shell function can put
it on the prompt. stdout carries only the picked command; everything
else goes to stderr.
"""
import sys
import argparse
import logging
from enum import Enum
from typing import Optional, Sequence, Tuple
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from favcmd.config import get_config
from favcmd.constants import EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_OK
from favcmd.editor import open_in_editor
from favcmd.examples import example_commands
from favcmd.exceptions import FavCmdError, ValidationError
from favcmd.formatting import find_selected, format_commands
from favcmd.models import Command
from favcmd.selector import FzfSelector, Selector
from favcmd.shell_integration import HELP_TEXT, SETUP_SNIPPET
from favcmd.store import CommandStore

logger = logging.getLogger(__name__)


console = Console(stderr=True)


class Subcommand(Enum):
    LIST = "list"
    ADD = "add"
    DELETE = "delete"
    EDIT = "edit"
    SETUP = "setup"
    EXAMPLES = "examples"
    CONFIG = "config"
    HELP = "help"

    @classmethod
    def parse(cls, token: Optional[str]) -> "Subcommand":
        """Map a command token to a Subcommand, defaulting to LIST."""
        if not token:
            return cls.LIST
        try:
            return cls(token.lower())
        except ValueError:
            logger.warning(f"Unknown command '{token}', running 'list'")
            return cls.LIST


# Subcommands that show the fzf picker
INTERACTIVE = {Subcommand.LIST, Subcommand.DELETE}

# Subcommands that only print static text and never touch the store
STATIC = {Subcommand.SETUP, Subcommand.HELP}


def pick(records: Sequence[Command], selector: Selector) -> Optional[Tuple[int, Command]]:
    """Let the user pick a record. Returns ``(index, record)`` or None."""
    lines = format_commands(records)
    selection = selector.present(lines)
    return find_selected(records, lines, selection)


def report_empty():
    console.print("[yellow]No commands saved yet.[/yellow] "
                  "Add one with [bold]fav-cmd add[/bold] or try [bold]fav-cmd examples[/bold].")


def cmd_list(args):
    """Pick a command and print it to stdout."""
    records = args.store.load()
    if not records:
        report_empty()
        return

    picked = pick(records, args.selector)
    if picked is None:
        logger.debug("No selection")
        return

    _, record = picked
    print(record.command)


def cmd_add(args):
    """Prompt for a new command and append it."""
    name = Prompt.ask("[cyan]Name[/cyan]", console=console, default="", show_default=False)
    description = Prompt.ask("[cyan]Description[/cyan]", console=console, default="", show_default=False)
    command = Prompt.ask("[cyan]Command[/cyan]", console=console, default="", show_default=False)

    record = Command(name=name.strip(), description=description.strip(), command=command.strip())
    args.store.append(record)

    console.print(f"[green]Added '{escape(record.name)}'[/green]")


def cmd_delete(args):
    """Pick a command and remove it."""
    records = args.store.load()
    if not records:
        report_empty()
        return

    picked = pick(records, args.selector)
    if picked is None:
        logger.debug("No selection")
        return

    index, record = picked
    removed = args.store.rewrite_excluding(index, expected=record)
    console.print(f"[green]Deleted '{escape(removed.name)}'[/green]")


def cmd_edit(args):
    """Open the store file in the user's editor."""
    open_in_editor(args.store.path, args.config.editor or None)


def cmd_setup(args):
    """Print the shell integration snippet."""
    print(SETUP_SNIPPET, end="")


def cmd_examples(args):
    """Overwrite the store with the example commands."""
    count = args.store.replace_all(example_commands())
    console.print(f"[green]Wrote {count} example commands to {escape(str(args.store.path))}[/green]")


def cmd_config(args):
    """Show the effective configuration."""
    console.print(f"[dim]Store: {escape(str(args.store.path))}[/dim]")
    print(args.config.to_toml(), end="")


def cmd_help(args):
    """Show usage."""
    print(HELP_TEXT, end="")


HANDLERS = {
    Subcommand.LIST: cmd_list,
    Subcommand.ADD: cmd_add,
    Subcommand.DELETE: cmd_delete,
    Subcommand.EDIT: cmd_edit,
    Subcommand.SETUP: cmd_setup,
    Subcommand.EXAMPLES: cmd_examples,
    Subcommand.CONFIG: cmd_config,
    Subcommand.HELP: cmd_help,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fav-cmd",
        description="fav-cmd: save and reuse your favorite command lines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fav-cmd add          # save a command
  fav-cmd              # pick one, printed to stdout
  fav-cmd delete       # pick one and remove it
  fav-cmd setup >> ~/.zshrc

Configuration:
  Commands file: ~/.config/fav-cmd/commands.txt
  Config file:   ~/.config/fav-cmd/config.toml
  Environment:   XDG_CONFIG_HOME, EDITOR, FAVCMD_*
        """
    )
    parser.add_argument(
        "command", nargs="?", default=Subcommand.LIST.value,
        help="One of: " + ", ".join(s.value for s in Subcommand) + " (default: list)",
    )
    return parser


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(levelname)s: %(message)s',
    )


def main(argv: Optional[Sequence[str]] = None, selector: Optional[Selector] = None) -> int:
    """Main entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config(reload=True)
        configure_logging(config.log_level)
        subcommand = Subcommand.parse(args.command)

        store = CommandStore(config.get_store_path())
        if subcommand not in STATIC:
            store.ensure_exists()

        if subcommand in INTERACTIVE:
            if selector is None:
                selector = FzfSelector.from_config(config)
            selector.check()

        args.config = config
        args.store = store
        args.selector = selector

        HANDLERS[subcommand](args)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Interrupted[/yellow]")
        return EXIT_INTERRUPTED
    except ValidationError as e:
        console.print(f"[red]Invalid command: {escape(str(e))}[/red]")
        return EXIT_FAILURE
    except (FavCmdError, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
