"""Protean Engine runner for the Push domain.

Starts an Engine worker that consumes Boards domain events from the
configured broker and invokes the push event handlers, which record and
deliver notifications through the dispatcher.

Usage:
    python src/server.py
"""

import argparse
import asyncio

from protean.server.engine import Engine
from push.wiring import reset_dispatcher


def _get_domain():
    """Import and initialize the push domain."""
    from push.domain import push

    push.init()
    return push


async def run():
    engine = Engine(_get_domain())
    try:
        await engine.run()
    finally:
        reset_dispatcher()


def main():
    argparse.ArgumentParser(description="Push Engine runner").parse_args()
    asyncio.run(run())


if __name__ == "__main__":
    main()
