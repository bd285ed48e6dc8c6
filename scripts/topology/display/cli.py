"""CLI entry point for the output topology configurator."""

import argparse
from typing import List, Optional

from topology.logging import Logger
from .errors import ApplyError, QueryError
from .manager import TopologyConfigurator

logger = Logger(__name__)

EXIT_OK = 0
EXIT_APPLY_FAILED = 1
EXIT_QUERY_FAILED = 2


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="display-topology",
        description="Apply the dual-monitor layout when the secondary output is connected",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, configurator: Optional[TopologyConfigurator] = None) -> int:
    parse_args(argv)

    configurator = configurator or TopologyConfigurator()
    try:
        result = configurator.reconcile()
    except QueryError as e:
        logger.error(f"Cannot query outputs: {e}")
        return EXIT_QUERY_FAILED
    except ApplyError as e:
        logger.error(str(e))
        if e.output:
            logger.error(f"Adjust the layout rule for {e.output} (requested {e.mode}, {e.rotation})")
        return EXIT_APPLY_FAILED

    if result.applied:
        logger.info("✓ layout applied")
    return EXIT_OK


if __name__ == '__main__':
    raise SystemExit(main())
