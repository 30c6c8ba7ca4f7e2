#!/usr/bin/env python3
"""One-time import of the legacy prototype's seed data.

Reads ``prototype/crm.html`` relative to the current directory and creates a
company, contact and engagement for every account, deal and lead it finds.
Running it twice creates duplicate engagements.

Usage:
    python scripts/import_prototype.py
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent.parent))

from harbor.config import get_settings
from harbor.importer.runner import run_import
from harbor.services.database import close_db

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


async def main() -> int:
    """Run the import and release the connection pool."""
    settings = get_settings()
    try:
        return await run_import(Path.cwd() / settings.prototype_path)
    finally:
        await close_db()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
