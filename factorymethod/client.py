"""
Client for the transport factories.

Picks a factory, asks it for a transport and makes the transport perform.
Only the abstract Transport / TransportFactory types are used past selection.

Usage:
    python -m factorymethod
    python -m factorymethod --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from . import config
from .base import TransportFactory
from .car import CarFactory
from .plane import PlaneFactory

logger = logging.getLogger(__name__)


def default_factories() -> List[TransportFactory]:
    return [CarFactory(), PlaneFactory()]


def run(factories: Optional[Iterable[TransportFactory]] = None) -> None:
    if factories is None:
        factories = default_factories()

    for factory in factories:
        transport = factory.create()
        logger.info(f"{factory.__class__.__name__} created {transport.__class__.__name__}")
        transport.perform()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Factory Method demo - car and plane transports')
    parser.add_argument('--log-level', default=config.LOG_LEVEL, type=str.upper,
                        choices=config.LOG_LEVELS,
                        help='Logging level for stderr diagnostics (default: FACTORYMETHOD_LOG_LEVEL or WARNING)')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
