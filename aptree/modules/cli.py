# aptree/modules/cli.py
"""
Command-line front end for aptree.
- Uses rich for colored status output; the tree itself is printed verbatim.
- Reads the package index from a local file (--test) or a repository URL.
- --filter prunes every package whose name contains the given substring.
- --format yaml|json dumps the dependency graph instead of drawing the tree.

Usage examples:
  aptree --package A --repo tests/data/Packages --test
  aptree --package bash --repo http://deb.debian.org/debian/dists/stable/main/binary-amd64
  aptree --package bash --repo ./Packages.gz --test --filter lib --format yaml
"""

from __future__ import annotations
import argparse
import sys
import traceback
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel

from aptree.modules import fetch
from aptree.modules import logger as _logger
from aptree.modules.config import ConfigError, config
from aptree.modules.graph import DependencyGraphBuilder
from aptree.modules.render import DUMP_FORMATS, dump_graph, visualize
from aptree.modules.repository import Repository

TREE_HEADER = "=== Dependency Tree ==="


def make_console(no_color: bool, stderr: bool = False) -> Console:
    if no_color:
        return Console(color_system=None, force_terminal=False, stderr=stderr)
    return Console(stderr=stderr)


def print_plain(console: Console, text: str):
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="aptree",
                                 description="Show the dependency tree of a package from an APT package index")
    ap.add_argument("--package", "-p", required=True, help="Root package name")
    ap.add_argument("--repo", "-r", required=True,
                    help="Repository URL or Packages[.gz|.xz] URL, or a local Packages file with --test")
    ap.add_argument("--test", action="store_true", help="Read --repo as a local file")
    ap.add_argument("--filter", "-f", default="", help="Do not expand packages whose name contains this")
    ap.add_argument("--format", choices=("tree",) + DUMP_FORMATS, default="tree", help="Output format")
    ap.add_argument("--conf", help="Path to aptree.conf")
    ap.add_argument("--no-color", action="store_true", help="Disable color output")
    ap.add_argument("--quiet", "-q", action="store_true", help="Only print the result")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging on stderr")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_argparser()
    args = parser.parse_args(argv)
    if not args.package.strip():
        parser.error("--package must not be empty")
    package = args.package.strip()

    out = make_console(args.no_color)
    err = make_console(args.no_color, stderr=True)

    if args.conf:
        try:
            config.load_file(args.conf)
        except ConfigError as e:
            err.print(f"[red]{e}[/red]")
            return 2
        _logger.reset()

    if args.verbose:
        _logger.set_level("debug")
    elif args.quiet:
        _logger.set_level("error")
    if args.no_color:
        _logger.set_color(False)
    log = _logger.get_logger("cli")

    if not args.quiet:
        print_plain(out, f"package={package}")
        print_plain(out, f"repo={args.repo}")
        print_plain(out, f"testMode={str(args.test).lower()}")
        print_plain(out, f"filter={args.filter}")

    try:
        text = fetch.load_text(args.repo, local=args.test)
    except fetch.FetchError as e:
        err.print(Panel(str(e), title="fetch failed", style="red"))
        log.error(str(e))
        return 1

    try:
        if args.format != "tree":
            repository = Repository.from_text(text)
            log.info(f"{len(repository)} packages indexed")
            graph = DependencyGraphBuilder().build(package, repository, args.filter)
            print_plain(out, dump_graph(graph, args.format).rstrip("\n"))
            return 0

        lines = visualize(package, text, args.filter)
        if not args.quiet:
            print_plain(out, "")
            print_plain(out, TREE_HEADER)
        for line in lines:
            print_plain(out, line)
        log.success(f"Rendered {len(lines)} lines for {package}")
    except Exception as e:
        err.print(f"[red]Unhandled error: {e}[/red]")
        log.error(str(e))
        log.debug(traceback.format_exc())
        return 3
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
