"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import shutil
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings

_BRIGHT_GREEN = "\033[1;92m"
_CYAN = "\033[96m"
_YELLOW = "\033[93m"
_RESET = "\033[0m"
_BOLD = "\033[1m"


def _g(s: str) -> str:
    return f"{_BRIGHT_GREEN}{s}{_RESET}"


def _c(s: str) -> str:
    return f"{_CYAN}{s}{_RESET}"


def _print_logo() -> None:
    cols = shutil.get_terminal_size(fallback=(100, 20)).columns
    div = "═" * min(cols, 64)
    print(_g(div))
    print(_g("  CS2 PING CHECKER"))
    print(_c("  Real ICMP/UDP latency to Valve game servers. No invented values."))
    print(_g(div))


def _menu() -> None:
    _print_logo()
    from presentation.cli import ProbeCommand, ServersCommand

    while True:
        cols = shutil.get_terminal_size(fallback=(96, 20)).columns
        print(f"\n{_g('═' * min(cols, 48))}")
        print(f"  {_BOLD}MAIN MENU{_RESET}")
        print(_g("═" * min(cols, 48)))
        print(f"  {_c('1')}  Probe servers")
        print(f"  {_c('2')}  List servers")
        print(f"  {_c('3')}  Exit")
        print(_g("─" * min(cols, 48)))
        choice = input("  Choose: ").strip()

        if choice == "1":
            asyncio.run(ProbeCommand().run_interactive())
        elif choice == "2":
            ServersCommand().run()
        elif choice == "3":
            print(f"\n  {_g('Goodbye!')}\n")
            break
        else:
            print(f"  {_YELLOW}Invalid option.{_RESET}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cs2-ping", description="Probe CS2 server reachability and latency.")
    sub = parser.add_subparsers(dest="command")

    probe = sub.add_parser("probe", help="probe every server and print the ranked report")
    probe.add_argument("--concurrency", "-c", type=int, default=None, help=f"parallel probes (default {settings.CONCURRENCY_LIMIT})")
    probe.add_argument("--region", "-r", action="append", default=[], help="limit to a region tag; repeatable")
    probe.add_argument("--json", action="store_true", dest="json_out", help="print JSON instead of a table")
    probe.add_argument("--no-geo", action="store_false", dest="geo", help="skip the client geolocation lookup")
    probe.add_argument("--no-color", action="store_false", dest="color")
    probe.add_argument("--servers-file", default=None, help="JSON roster replacing the built-in list")

    servers = sub.add_parser("servers", help="list the configured servers")
    servers.add_argument("--json", action="store_true", dest="json_out")
    servers.add_argument("--servers-file", default=None)
    return parser


def _dispatch(args: argparse.Namespace) -> int:
    from presentation.cli import ProbeCommand, ProbeOptions, ServersCommand

    if args.command == "servers":
        return ServersCommand().run(json_out=args.json_out, servers_file=args.servers_file)
    options = ProbeOptions(
        concurrency=args.concurrency,
        regions=args.region,
        json_out=args.json_out,
        geo=args.geo,
        servers_file=args.servers_file,
        color=args.color,
    )
    return asyncio.run(ProbeCommand().run(options))


def main(argv: list[str]) -> int:
    args = build_parser().parse_args(argv)
    bootstrap_logging(
        service="probe",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="probe.jsonl",
    )
    try:
        settings.validate()
        if args.command is None:
            _menu()
            return 0
        return _dispatch(args)
    except (ValueError, OSError) as e:
        print(f"configuration error: {e}", file=sys.stderr)
        return 2
    finally:
        shutdown_logging()


def _entry() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
