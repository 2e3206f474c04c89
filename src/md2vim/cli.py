#!/usr/bin/env python3
"""
md2vim: Convert Markdown documents into Vim help files

Common usage:
  md2vim README.md doc/plugin.txt
  md2vim --desc "Fuzzy finder" README.md doc/finder.txt
  md2vim --name plugin.txt - < README.md

Headings become tagged sections with a table of contents, code and quote
blocks become literal blocks, and lists are indented to the tab width.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import sys
from dataclasses import dataclass
from pathlib import Path, PurePath

from md2vim.config import find_config_file, load_config, merge_cli_with_config
from md2vim.convert_api import convert_file
from md2vim.vimdoc.diagnostics import RenderWarning
from md2vim.vimdoc.options import (
    DEFAULT_COLUMN_WIDTH,
    DEFAULT_TAB_WIDTH,
    RenderFlag,
    RenderOptions,
)


@dataclass
class Options:
    """Command-line options for the md2vim tool."""

    input: str
    output: str
    name: str | None
    cols: int
    tabs: int
    notoc: bool
    norules: bool
    pascal: bool
    desc: str
    version: bool


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns a tuple of (options, explicit_flags) where `explicit_flags` tracks
    which flags the user explicitly passed (for config merge precedence).
    """
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=str,
        default=None,
        help="Markdown input file (use '-' for stdin)",
    )
    parser.add_argument(
        "output",
        nargs="?",
        type=str,
        default="-",
        help="Help file to write (use '-' for stdout, the default)",
    )
    parser.add_argument(
        "-n",
        "--name",
        type=str,
        default=None,
        help="Help file name used for the title line and tags when writing to stdout "
        "(default: the input file stem with a .txt extension)",
    )
    parser.add_argument(
        "-c",
        "--cols",
        type=int,
        default=DEFAULT_COLUMN_WIDTH,
        help="Number of columns to use for layout (default: %(default)s)",
    )
    parser.add_argument(
        "-t",
        "--tabs",
        type=int,
        default=DEFAULT_TAB_WIDTH,
        help="Tab width in spaces (default: %(default)s)",
    )
    parser.add_argument(
        "--notoc",
        action="store_true",
        help="Do not generate a table of contents for headings",
    )
    parser.add_argument(
        "--norules",
        action="store_true",
        help="Do not generate horizontal rules above headings",
    )
    parser.add_argument(
        "--pascal",
        action="store_true",
        help="Use PascalCase for tags instead of lower_snake_case",
    )
    parser.add_argument(
        "--desc",
        type=str,
        default="",
        help="Short description of the help file, shown on the title line",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    # Re-parse with sentinel defaults to detect which flags were actually supplied,
    # rather than comparing against default values.
    _SENTINEL = object()
    sentinel_parser = argparse.ArgumentParser(add_help=False)
    sentinel_parser.add_argument("-c", "--cols", type=int, default=_SENTINEL)
    sentinel_parser.add_argument("-t", "--tabs", type=int, default=_SENTINEL)
    sentinel_parser.add_argument("--notoc", action="store_true", default=_SENTINEL)
    sentinel_parser.add_argument("--norules", action="store_true", default=_SENTINEL)
    sentinel_parser.add_argument("--pascal", action="store_true", default=_SENTINEL)
    sentinel_parser.add_argument("--desc", type=str, default=_SENTINEL)
    sentinel_opts, _ = sentinel_parser.parse_known_args(args if args is not None else sys.argv[1:])

    explicit_flags: set[str] = set()
    for field_name in ("cols", "tabs", "notoc", "norules", "pascal", "desc"):
        if getattr(sentinel_opts, field_name, _SENTINEL) is not _SENTINEL:
            explicit_flags.add(field_name)

    return (
        Options(
            input=opts.input,
            output=opts.output,
            name=opts.name,
            cols=opts.cols,
            tabs=opts.tabs,
            notoc=opts.notoc,
            norules=opts.norules,
            pascal=opts.pascal,
            desc=opts.desc,
            version=opts.version,
        ),
        explicit_flags,
    )


def _help_file_name(options: Options) -> str:
    """The help file name: the output path, else `--name`, else the input stem."""
    if options.output != "-":
        return PurePath(options.output).name
    if options.name:
        return options.name
    if options.input and options.input != "-":
        return PurePath(options.input).stem + ".txt"
    return "help.txt"


def _render_options(options: Options) -> RenderOptions:
    flags = RenderFlag.NONE
    if options.notoc:
        flags |= RenderFlag.NO_TOC
    if options.norules:
        flags |= RenderFlag.NO_RULES
    if options.pascal:
        flags |= RenderFlag.PASCAL
    return RenderOptions(
        filename=_help_file_name(options),
        description=options.desc,
        column_width=options.cols,
        tab_width=options.tabs,
        flags=flags,
    )


def _print_warning(warning: RenderWarning) -> None:
    print(f"Warning: {warning.message}", file=sys.stderr)


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the md2vim CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options, explicit_flags = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("md2vim")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if not options.input:
        print(
            "Error: No input specified. Provide a Markdown file or '-' for stdin."
            " Use --help for more options.",
            file=sys.stderr,
        )
        return 1

    try:
        # Load and merge config file settings
        config_path = find_config_file(Path.cwd())
        if config_path:
            merge_cli_with_config(options, load_config(config_path), explicit_flags)

        convert_file(
            options.input,
            options.output,
            _render_options(options),
            on_warning=_print_warning,
        )
    except ValueError as e:
        # Bad option or config values.
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        # Catch other potential file or processing errors.
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
