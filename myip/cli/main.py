# myip/cli/main.py
import argparse
import logging
import pathlib
import sys
from typing import List, Optional

from myip import __version__
from myip.config import DEFAULT_PROBE_TIMEOUT, DEFAULT_RACE_TIMEOUT, DEFAULT_SELECTION
from myip.core.errors import MyIPError, UnknownSourceError
from myip.core.models import Family, Origin, ResolverConfig
from myip.core.registry import PLUGINS, get_plugin, plugin_names
from myip.resolver import Resolver
from myip.selection import SELECTION_CHOICES

# --- Global Variables ---
logger = logging.getLogger("myip.cli")


# --- Utility Functions ---
def setup_cli_logging(verbose: bool = False, log_file: Optional[pathlib.Path] = None) -> None:
    """Configures logging for the CLI. Records go to stderr, stdout is reserved for addresses."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file, mode='a'))
        except OSError as e:
            print(f"Error: Failed to set up log file at '{log_file}': {e}", file=sys.stderr)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s [%(levelname)s] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True
    )


def load_plugin_modules() -> None:
    """Imports the source modules to trigger their registration."""
    import myip.source  # noqa: F401
    logger.debug(f"Registered sources: {', '.join(plugin_names('source'))}")


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a number")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be greater than zero")
    return number


def build_parser() -> argparse.ArgumentParser:
    actions = "\n".join(
        f"{name:>10}  {PLUGINS['source'][name].description or ''}" for name in plugin_names("source")
    )
    parser = argparse.ArgumentParser(
        prog="myip",
        description="myip returns your local IPv6 (or IPv4) address.",
        epilog=f"Actions:\n\n{actions}",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument("action", help="The action to perform (local or remote).")
    parser.add_argument(
        "-4", dest="use_ipv4", action="store_true",
        help="Use IPv4 instead of IPv6"
    )
    parser.add_argument(
        "--select", dest="selection", default=DEFAULT_SELECTION,
        help="Select one or more IPs (\"{}\")".format('", "'.join(SELECTION_CHOICES))
    )
    parser.add_argument(
        "--timeout", type=positive_float, default=DEFAULT_RACE_TIMEOUT,
        help=f"Overall time limit in seconds for remote lookups (default: {DEFAULT_RACE_TIMEOUT:g})"
    )
    parser.add_argument(
        "--probe-timeout", type=positive_float, default=DEFAULT_PROBE_TIMEOUT,
        help=f"Time limit in seconds for a single remote provider (default: {DEFAULT_PROBE_TIMEOUT:g})"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable verbose (DEBUG level) logging to stderr."
    )
    parser.add_argument(
        "--log-file", type=pathlib.Path,
        help="Path to a file for logging (appends)."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_config(args: argparse.Namespace) -> ResolverConfig:
    action = args.action.strip().lower()
    get_plugin("source", action)

    return ResolverConfig(
        origin=Origin(action),
        family=Family.IPV4 if args.use_ipv4 else Family.IPV6,
        selection=args.selection,
        race_timeout=args.timeout,
        probe_timeout=args.probe_timeout,
    )


# --- Main CLI Parsing ---
def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    load_plugin_modules()
    parser = build_parser()

    if not argv:
        parser.print_help(sys.stderr)
        return 1

    args = parser.parse_args(argv)
    setup_cli_logging(args.verbose, args.log_file)

    try:
        config = build_config(args)
    except UnknownSourceError as e:
        print(f"{e}\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    try:
        addresses = Resolver(config).resolve()
    except MyIPError as e:
        logger.debug("Lookup failed", exc_info=True)
        print(str(e).strip(), file=sys.stderr)
        return 1

    for address in addresses:
        print(address)
    return 0


if __name__ == "__main__":
    sys.exit(main())
