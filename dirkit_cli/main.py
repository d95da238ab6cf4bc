"""Command line surface for resolving and creating well-known directories."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Sequence

from dirkit_core import __version__
from dirkit_core.dirs import AppDirs, DirectoryKind, for_platform
from dirkit_core.errors import DirkitError
from dirkit_core.materialize import create_directory, directory_path
from dirkit_core.platforms import Platform, current_platform, host_os_name

_KIND_CHOICES = [kind.value for kind in DirectoryKind]
_PLATFORM_CHOICES = [platform.value for platform in Platform]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirkit",
        description="Resolve and create platform-specific application directories.",
    )
    parser.add_argument("--version", action="version", version=f"dirkit v{__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    show_cmd = subparsers.add_parser("show", help="print the path of a directory")
    _add_directory_arguments(show_cmd)
    show_cmd.set_defaults(func=_handle_show)

    create_cmd = subparsers.add_parser("create", help="create a directory and print its path")
    _add_directory_arguments(create_cmd)
    create_cmd.set_defaults(func=_handle_create)

    list_cmd = subparsers.add_parser("list", help="print every well-known directory")
    _add_platform_argument(list_cmd)
    list_cmd.add_argument(
        "--format",
        dest="output_format",
        default="text",
        choices=["text", "json"],
        help="output format",
    )
    list_cmd.set_defaults(func=_handle_list)

    platform_cmd = subparsers.add_parser("platform", help="print the detected platform")
    platform_cmd.set_defaults(func=_handle_platform)

    return parser


def _add_platform_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--platform",
        default=Platform.DEFAULT.value,
        choices=_PLATFORM_CHOICES,
        help="resolve for this platform instead of the host",
    )


def _add_directory_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "kind",
        help=f"directory kind, one of: {', '.join(_KIND_CHOICES)}",
    )
    parser.add_argument("--app", dest="app_name", help="application subdirectory name")
    parser.add_argument(
        "--roaming",
        action="store_true",
        help="use the roaming profile (user-data/user-config on Windows)",
    )
    parser.add_argument(
        "--local",
        action="store_true",
        help="use the locally installed variant (site-data on Unix)",
    )
    _add_platform_argument(parser)


def _display(path: os.PathLike[str]) -> str:
    # bytes that are not valid UTF-8 are shown escaped instead of failing the write
    return os.fsencode(path).decode("utf-8", errors="backslashreplace")


def _dirs_for(args: argparse.Namespace) -> AppDirs:
    return for_platform(Platform(args.platform))


def _handle_show(args: argparse.Namespace) -> int:
    path = directory_path(
        _dirs_for(args),
        DirectoryKind.parse(args.kind),
        args.app_name,
        roaming=args.roaming,
        local=args.local,
    )
    print(_display(path))
    return 0


def _handle_create(args: argparse.Namespace) -> int:
    path = create_directory(
        _dirs_for(args),
        DirectoryKind.parse(args.kind),
        args.app_name,
        roaming=args.roaming,
        local=args.local,
    )
    print(_display(path))
    return 0


def _handle_list(args: argparse.Namespace) -> int:
    dirs = _dirs_for(args)
    resolved: dict[str, str] = {}
    failures: dict[str, str] = {}
    for kind in DirectoryKind:
        try:
            resolved[kind.value] = _display(dirs.resolve(kind))
        except DirkitError as exc:
            failures[kind.value] = str(exc)

    if args.output_format == "json":
        print(json.dumps({"directories": resolved, "errors": failures}, indent=2))
    else:
        width = max(len(name) for name in _KIND_CHOICES)
        for kind in DirectoryKind:
            value = resolved.get(kind.value) or f"<error: {failures[kind.value]}>"
            print(f"{kind.value:<{width}}  {value}")
    return 1 if failures else 0


def _handle_platform(args: argparse.Namespace) -> int:
    print(f"platform: {current_platform().value}")
    print(f"os name: {host_os_name()}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (DirkitError, OSError) as exc:
        print(f"dirkit: {exc}", file=sys.stderr)
        return 1
