#!/usr/bin/env python3
"""Command-line interface for size-cli."""
import argparse
import json
import sys

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

from .core import config as config_module
from .core.constants import NUMBER_FORMATS
from .core.errors import SizeError
from .core.options import FormatOptions
from .services.collect_service import collect
from .services.format_service import format_size
from .services.path_service import split_tokens

console = Console()
err_console = Console(stderr=True)


def _emit(text) -> None:
    """Primary result goes to stdout, unstyled."""
    console.print(str(text), markup=False, highlight=False, soft_wrap=True)


def _add_format_args(p: argparse.ArgumentParser) -> None:
    g = p.add_argument_group("formatting")
    g.add_argument("-d", "--decimals", type=int, default=None, help="Decimal places (default 2).")
    g.add_argument("--round-down", action="store_true", default=None,
                   help="Keep amounts sitting exactly on a unit boundary in the lower unit.")
    g.add_argument("--bytes-text", action="store_true", default=None, help="Label plain byte counts with 'b'.")
    g.add_argument("-u", "--upper", dest="upper_case", action="store_true", default=None, help="Upper-case unit labels.")
    g.add_argument("-t", "--title", dest="title_case", action="store_true", default=None, help="Title-case unit labels.")
    g.add_argument("-l", "--long", action="store_true", default=None, help="Spell units out (kilobytes, ...).")
    g.add_argument("--no-space", action="store_true", default=None, help="No space between number and unit.")
    g.add_argument("--extra-byte-digits", action="store_true", default=None,
                   help="Show decimals for plain byte counts too.")
    g.add_argument("-f", "--format", dest="format_string", choices=sorted(NUMBER_FORMATS), default=None,
                   help="Number format: N grouped, F fixed, X/x hexadecimal.")
    g.add_argument("--prefix", dest="prefix_text", default=None, help="Text placed before the number.")


def _format_options(args: argparse.Namespace, cfg: dict) -> FormatOptions:
    base = config_module.format_options_from(cfg)
    return base.merged(
        decimals=args.decimals,
        round_down=args.round_down,
        bytes_text=args.bytes_text,
        upper_case=args.upper_case,
        title_case=args.title_case,
        long=args.long,
        no_space=args.no_space,
        extra_byte_digits=args.extra_byte_digits,
        format_string=args.format_string,
        prefix_text=args.prefix_text,
    )


def _fail(err: Exception) -> None:
    err_console.print(f"[red]Error: {escape(str(err))}[/]")
    sys.exit(1)


def print_verbose(result, options: FormatOptions) -> None:
    """File list and aggregate statistics, on the diagnostic stream."""
    err_console.print(Rule("[bold cyan]Files[/]", style="cyan"))
    table = Table(show_header=True, header_style="bold cyan", box=None, padding=(0, 2))
    table.add_column("Path", style="")
    table.add_column("Size", justify="right", style="yellow")
    for entry in result.files:
        table.add_row(escape(entry.path), escape(format_size(entry.size, options)))
    err_console.print(table)
    stats = result.stats
    err_console.print()
    err_console.print(f"  Files:   {stats.count}")
    err_console.print(f"  Total:   {escape(format_size(stats.sum, options))}")
    err_console.print(f"  Average: {escape(format_size(stats.average, options))}")
    err_console.print(f"  Min:     {escape(format_size(stats.min, options))}")
    err_console.print(f"  Max:     {escape(format_size(stats.max, options))}")
    err_console.print()


def _run_format(argv: list) -> None:
    """Format raw byte amounts given on the command line."""
    p = argparse.ArgumentParser(prog="size-cli format", description="Format byte amounts.")
    p.add_argument("amounts", nargs="+", type=lambda s: int(s, 0), metavar="AMOUNT",
                   help="Byte amounts (decimal, or 0x.. hexadecimal).")
    _add_format_args(p)
    args = p.parse_args(argv)
    try:
        options = _format_options(args, config_module.load())
        out = format_size(args.amounts, options)
    except SizeError as e:
        _fail(e)
        return
    for line in [out] if isinstance(out, str) else out:
        _emit(line)


def _run_config(argv: list) -> None:
    """Run the configuration tasks."""
    p = argparse.ArgumentParser(prog="size-cli config", description="Manage configuration.")
    p.add_argument("--init", action="store_true", help="Create default config file")
    p.add_argument("--overwrite", action="store_true", help="With --init, replace an existing config file")
    p.add_argument("--show", action="store_true", help="Show current config")
    args = p.parse_args(argv)
    if args.init:
        path, written = config_module.init_config(overwrite=args.overwrite)
        err_console.print(Rule("[bold cyan]Config[/]", style="cyan"))
        if written:
            err_console.print(f"  [green]✓[/] Created config at [cyan]{escape(path)}[/]")
        else:
            err_console.print(f"  [yellow]Config already exists at {escape(path)} (use --overwrite to replace)[/]")
        return
    if args.show:
        if not config_module.config_exists():
            err_console.print("[yellow]No config found. Run: size-cli config --init[/]")
            return
        _emit(json.dumps(config_module.load(), indent=2))
        return
    p.print_help()


def main(argv=None):
    """Main function."""
    argv = argv if argv is not None else sys.argv[1:]
    if argv and argv[0] == "config":
        _run_config(argv[1:])
        return
    if argv and argv[0] == "format":
        _run_format(argv[1:])
        return

    parser = argparse.ArgumentParser(
        prog="size-cli",
        description="Total the size of files, directories and glob patterns.",
        epilog="Subcommands: format, config",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH",
                        help="Files, directories or glob patterns; comma-separated lists allowed (default: .)")
    parser.add_argument("-a", "--all", "--force", dest="include_hidden", action="store_true", default=None,
                        help="Include hidden and system files.")
    parser.add_argument("--raw", action="store_true", help="Print the total as a plain byte count.")
    parser.add_argument("-v", "--verbose", action="store_true", help="List files and statistics on stderr.")
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not print warnings.")
    parser.add_argument("-C", "--cwd", default=None, help="Directory relative paths are resolved against.")
    _add_format_args(parser)
    args = parser.parse_args(argv)

    cfg = config_module.load()
    try:
        options = _format_options(args, cfg)
    except SizeError as e:
        _fail(e)
        return
    include_hidden = args.include_hidden if args.include_hidden is not None else cfg.get("include_hidden", False)
    specs = split_tokens(args.paths) or ["."]

    result = collect(specs, include_hidden=include_hidden, cwd=args.cwd)
    if not args.quiet:
        for w in result.warnings:
            err_console.print(f"[yellow]Warning: {escape(w.message)}[/]")
    try:
        if args.verbose:
            print_verbose(result, options)
        if args.raw:
            _emit(result.stats.sum)
        else:
            _emit(format_size(result.stats.sum, options))
    except SizeError as e:
        _fail(e)


if __name__ == "__main__":
    main()
