"""
Command line entry points.

effigy
Serve the effigy table as an osquery extension. osquery passes the socket and
timeouts when it autoloads the extension.

effigy-report
Run the pipeline once and print the row as json, either against a running
osquery or against facts saved in a json file.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from effigy import __version__
from effigy.advisory.client import AdvisoryClient
from effigy.advisory.http import HttpClient, UrllibHttpClient
from effigy.config import EffigyConfig, add_osquery_arguments
from effigy.core.errors import EffigyError
from effigy.inventory.base import InventorySource
from effigy.inventory.static import StaticInventorySource
from effigy.log import configure_logging
from effigy.table.plugin import EffigyTable

logger = logging.getLogger(__name__)

EXTENSION_NAME = "com.github.groob.effigy"


def build_table(
    config: EffigyConfig,
    source: InventorySource,
    http: HttpClient | None = None,
) -> EffigyTable:
    advisory = AdvisoryClient(
        http=http or UrllibHttpClient(timeout_seconds=config.http_timeout_seconds),
    )
    return EffigyTable(source=source, advisory=advisory)


def _osquery_source(config: EffigyConfig) -> InventorySource:
    from effigy.inventory.osquery_source import OsqueryInventorySource, open_client

    return OsqueryInventorySource(client=open_client(config.socket_path, config.timeout_seconds))


def serve() -> int:
    parser = argparse.ArgumentParser(prog="effigy", description="effigy osquery extension")
    add_osquery_arguments(parser)
    # osquery.start_extension parses sys.argv again, so both must read the same flags
    args = parser.parse_args()
    config = EffigyConfig.from_args(args)
    configure_logging(config.verbose)

    import osquery
    from thrift.Thrift import TException

    from effigy.table.osquery_plugin import plugin_for

    try:
        table = build_table(config, _osquery_source(config))
    except EffigyError as exc:
        logger.error("error creating extension client: %s", exc)
        return 1

    osquery.register_plugin(plugin_for(table))
    try:
        osquery.start_extension(name=EXTENSION_NAME, version=__version__)
    except TException as exc:
        logger.error("error running extension: %s", exc)
        return 1

    # start_extension only returns when it could not register with osquery
    logger.error("could not start extension on %s", config.socket_path)
    return 1


def report(argv: list[str] | None = None, http: HttpClient | None = None) -> int:
    parser = argparse.ArgumentParser(prog="effigy-report", description="Print the effigy row as json")
    add_osquery_arguments(parser)
    parser.add_argument("--inventory-json", type=Path, help="Read facts from this json file instead of osquery")
    parser.add_argument("--http-timeout", type=float, default=10, help="Advisory call timeout in seconds")
    args = parser.parse_args(argv)
    config = EffigyConfig.from_args(args)
    configure_logging(config.verbose)

    try:
        if args.inventory_json is not None:
            source: InventorySource = StaticInventorySource.from_json_file(args.inventory_json)
        else:
            source = _osquery_source(config)
        rows = build_table(config, source, http=http).generate()
    except (EffigyError, OSError) as exc:
        logger.error("effigy report failed: %s", exc)
        return 1

    sys.stdout.write(json.dumps(rows[0], indent=2) + "\n")
    return 0


def main() -> None:
    raise SystemExit(serve())


def report_main() -> None:
    raise SystemExit(report())
