"""CLI entry point for beachcast."""

import argparse
import asyncio
import json
import logging

from beachcast.api import build_session, create_app
from beachcast.config.loader import get_config_value, load_config, set_config_value
from beachcast.reporting.formatters import (
    format_bundle_json,
    format_bundle_text,
    format_location_line,
)

DEFAULT_CONFIG = "beachcast.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="beachcast",
        description="Beach weather, sea and tide conditions",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("locations", help="List configured locations")

    weather_p = sub.add_parser("weather", help="Show conditions for a location")
    weather_p.add_argument("location_id")
    weather_p.add_argument("--json", action="store_true", help="JSON output")

    search_p = sub.add_parser("search", help="Search beaches by name")
    search_p.add_argument("query")

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Show a config value")
    get_p.add_argument("key")
    set_p = config_sub.add_parser("set", help="Validate a config override")
    set_p.add_argument("keyvalue", help="key=value to set")

    serve_p = sub.add_parser("serve", help="Run the HTTP API")
    serve_p.add_argument("--host", default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8777)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "locations":
        return _cmd_locations(config)
    elif args.command == "weather":
        return _cmd_weather(config, args)
    elif args.command == "search":
        return _cmd_search(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_locations(config) -> int:
    session = build_session(config)
    for loc in session.locations():
        print(format_location_line(loc))
    return 0


def _cmd_weather(config, args) -> int:
    session = build_session(config)
    bundle = asyncio.run(session.aggregator.get_bundle(args.location_id))
    if bundle is None:
        print(f"Error: unknown location {args.location_id}")
        return 1
    print(format_bundle_json(bundle) if args.json else format_bundle_text(bundle))
    return 0


def _cmd_search(config, args) -> int:
    session = build_session(config)
    results = asyncio.run(session.search_service.search(args.query))
    if not results:
        print("No matches")
        return 0
    for r in results:
        print(f"{r.display_name}  [{r.latitude:.4f}, {r.longitude:.4f}]")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        if hasattr(value, "model_dump"):
            value = value.model_dump()
        elif isinstance(value, list):
            value = [v.model_dump() if hasattr(v, "model_dump") else v for v in value]
        print(json.dumps(value, ensure_ascii=False))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get key | config set key=value")
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0
