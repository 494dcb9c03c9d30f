"""
Command-line interface for the domain finder.

This module provides the main CLI entry point with commands for:
- serve: Run the HTTP API with uvicorn
- check: Check a base name against a list of TLDs
- tlds: List or search known TLDs
- config: Show the effective configuration
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .config import SystemConfig, load_config_from_env
from .exceptions import DomainFinderError
from .models import CheckDomainsRequest, DomainsResult, GetTldsRequest
from .services import create_services


def _load_config(args: argparse.Namespace) -> SystemConfig:
    env_file = Path(args.env_file) if args.env_file else None
    return load_config_from_env(dotenv_path=env_file)


def format_results(result: DomainsResult) -> list[str]:
    """Render availability results as aligned text lines."""
    lines = []
    width = max((len(r.domain) for r in result.domains), default=0)
    for r in sorted(result.domains, key=lambda r: r.domain):
        status = "AVAILABLE" if r.available else "taken"
        line = f"  {r.domain.ljust(width)}  {status}"
        if r.available and r.display_price is not None:
            line += f"  {r.display_price:.2f} {r.currency or ''}".rstrip()
        if not r.definitive:
            line += "  (estimate)"
        lines.append(line)
    for e in result.errors:
        lines.append(f"  {e.domain.ljust(width)}  error: {e.message}")
    return lines


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command."""
    import uvicorn

    from .api import create_app

    config = _load_config(args)
    host = args.host or config.server.host
    port = args.port or config.server.port

    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Handle the 'check' command."""
    services = create_services(_load_config(args))
    request = CheckDomainsRequest(domain=args.domain, tlds=args.tld)

    payload = asyncio.run(services.orchestrator.check(request))

    if args.json:
        print(json.dumps(payload, indent=2))
        return 0

    result = DomainsResult.from_payload(payload)
    print(f"Availability for '{args.domain}':")
    for line in format_results(result):
        print(line)
    return 0


def cmd_tlds(args: argparse.Namespace) -> int:
    """Handle the 'tlds' command."""
    services = create_services(_load_config(args))
    request = GetTldsRequest(input=args.input, page_size=args.page_size, type=args.type)

    names = asyncio.run(services.tld_lookup.lookup(request))

    if args.json:
        print(json.dumps(names))
    else:
        for name in names:
            print(name)
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Handle the 'config' command."""
    config = _load_config(args)

    print("Effective configuration:")
    print(f"  Registrar URL: {config.registrar.base_url}")
    print(f"  Registrar credentials: {'configured' if config.registrar.has_credentials else 'missing'}")
    print(f"  Check timeout: {config.registrar.check_timeout_seconds}s")
    print(f"  TLD source: {config.tld_source.kind.value}")
    if config.tld_source.dataset_path:
        print(f"  TLD dataset: {config.tld_source.dataset_path}")
    print(f"  TLD cache TTL: {config.tld_source.cache_ttl_seconds}s")
    print(f"  Log level: {config.logging.level} ({config.logging.output_format})")
    print(f"  Server: {config.server.host}:{config.server.port}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="domain-finder",
        description="Domain availability checks and TLD search",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--env-file", "-e",
        help="Path to a .env file to load before reading the environment",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'serve' command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP API",
    )
    serve_parser.add_argument("--host", help="Bind address (default: HOST or 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, help="Bind port (default: PORT or 8000)")
    serve_parser.set_defaults(func=cmd_serve)

    # 'check' command
    check_parser = subparsers.add_parser(
        "check",
        help="Check a base name against TLDs",
    )
    check_parser.add_argument(
        "domain",
        help="Base name without TLD (e.g., example)",
    )
    check_parser.add_argument(
        "--tld", "-t",
        action="append",
        help="TLD suffix including the dot; repeatable (default: .com .net .org .de)",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the raw registrar response",
    )
    check_parser.set_defaults(func=cmd_check)

    # 'tlds' command
    tlds_parser = subparsers.add_parser(
        "tlds",
        help="List or search known TLDs",
    )
    tlds_parser.add_argument("--input", "-i", help="Substring to search for")
    tlds_parser.add_argument(
        "--type",
        choices=["GENERIC", "COUNTRY_CODE"],
        help="Only list TLDs of this type",
    )
    tlds_parser.add_argument(
        "--page-size", "-n",
        type=int,
        help="Maximum number of names (default: 500, max: 1000)",
    )
    tlds_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the names as a JSON array",
    )
    tlds_parser.set_defaults(func=cmd_tlds)

    # 'config' command
    config_parser = subparsers.add_parser(
        "config",
        help="Show the effective configuration",
    )
    config_parser.add_argument(
        "action",
        choices=["show"],
        help="Configuration action",
    )
    config_parser.set_defaults(func=cmd_config)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except DomainFinderError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
