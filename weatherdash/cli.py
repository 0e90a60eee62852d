"""CLI entry point for the weather dashboard."""

import argparse
import logging

from weatherdash.app.session import DashboardSession, build_session
from weatherdash.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from weatherdash.ingest.geolocation import FixedPosition
from weatherdash.reporting.formatters import format_view_json, format_view_text

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherdash",
        description="Current, hourly and 10-day weather for one location",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # search
    search_p = sub.add_parser("search", help="Look up a place by name")
    search_p.add_argument("query", help="City, town or postcode")
    _add_view_args(search_p)

    # locate
    locate_p = sub.add_parser("locate", help="Use coordinates as the device position")
    locate_p.add_argument("--lat", type=float, default=None)
    locate_p.add_argument("--lon", type=float, default=None)
    _add_view_args(locate_p)

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    # serve
    serve_p = sub.add_parser("serve", help="Run the web dashboard")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "search":
        session = build_session(config)
        session.search(args.query)
        return _show(session, args)
    elif args.command == "locate":
        session = build_session(config)
        provider = FixedPosition(args.lat, args.lon)
        session.locate(provider)
        return _show(session, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


def _add_view_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--day", type=int, default=None, help="Show forecast day N (0 = today)"
    )
    p.add_argument("--json", action="store_true", help="Print the view as JSON")


def _show(session: DashboardSession, args) -> int:
    if args.day is not None and session.view().render is not None:
        try:
            session.select_day(args.day)
        except IndexError as e:
            print(f"Error: {e}")
            return 1
    view = session.view()
    print(format_view_json(view) if args.json else format_view_text(view))
    return 0 if view.render is not None else 1


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        if args.config is None:
            print("Error: config set needs --config PATH to write to")
            return 1
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = (part.strip() for part in kv.split("=", 1))
        try:
            new_config = set_config_value(config, key, value)
        except (KeyError, TypeError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        save_config(new_config, args.config)
        logger.info("Wrote %s to %s", key, args.config)
        print(f"Set {key} = {get_config_value(new_config, key)}")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from weatherdash.dashboard import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    logger.info("Serving dashboard on http://%s:%d", host, port)
    uvicorn.run(create_app(build_session(config)), host=host, port=port)
    return 0
