#!/usr/bin/env python3
"""
Entry point for running as module: python -m portfolio
"""

import asyncio

from portfolio.app import main


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
