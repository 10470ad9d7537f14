#!/usr/bin/env python3
"""Command-line interface for bedazzle examples."""

import argparse
import json
import logging
import sys

from .config import config_path, load_config
from .exceptions import ConfigError
from .examples import car, cart, shape


def cmd_shape(args):
    """Print the decorated rectangle"""
    return shape.main()


def cmd_cart(args):
    """Run the checkout scenario"""
    return cart.main()


def cmd_car(args):
    """Run the car setup simulator"""
    config = load_config()
    return car.main(
        turbo_level=config["turbo_level"] if args.turbo is None else args.turbo,
        laps=config["default_laps"] if args.laps is None else args.laps,
        track_length=config["track_length"] if args.length is None else args.length,
        track_turns=config["track_turns"] if args.turns is None else args.turns,
    )


def cmd_config_show(args):
    """Show the effective configuration"""
    config = load_config()
    if args.json:
        print(json.dumps(config, indent=config["json_indent"]))
        return 0

    print(f"Configuration file: {config_path()}")
    for key in sorted(config):
        print(f"  {key}: {config[key]}")
    return 0


def _help_for(subparser):
    """Build a command that prints a subcommand group's help"""
    def cmd_help(args):
        subparser.print_help()
        return 0
    return cmd_help


def _setup_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG)
        return

    level_name = load_config().get("log_level", "INFO")
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        logging.basicConfig(level=logging.INFO)
        logging.warning(
            "Unknown log level '%s' in configuration. Falling back to INFO.",
            level_name,
        )
        return

    logging.basicConfig(level=level)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="bedazzle",
        description="Run the bedazzle example objects",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    shape_parser = subparsers.add_parser("shape", help="Decorated rectangle")
    shape_parser.set_defaults(func=cmd_shape)

    cart_parser = subparsers.add_parser("cart", help="Shopping cart checkout")
    cart_parser.set_defaults(func=cmd_cart)

    car_parser = subparsers.add_parser("car", help="F1 car setup simulator")
    car_parser.add_argument("--turbo", type=int, help="Turbo upgrade level (0 to skip)")
    car_parser.add_argument("--laps", type=int, help="Race distance in laps")
    car_parser.add_argument("--length", type=float, help="Track length in km")
    car_parser.add_argument("--turns", type=int, help="Number of turns")
    car_parser.set_defaults(func=cmd_car)

    config_parser = subparsers.add_parser("config", help="Inspect configuration")
    config_parser.set_defaults(func=_help_for(config_parser))
    config_subparsers = config_parser.add_subparsers(dest="config_command", help="Config commands")

    config_show_parser = config_subparsers.add_parser("show", help="Show effective configuration")
    config_show_parser.add_argument("--json", action="store_true", help="Output as JSON")
    config_show_parser.set_defaults(func=cmd_config_show)

    return parser


def main(argv=None):
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        _setup_logging(args.debug)

        if hasattr(args, "func"):
            return args.func(args)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
