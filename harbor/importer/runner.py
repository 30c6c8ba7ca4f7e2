"""Entry point logic for the one-shot prototype import."""

import logging
import sys
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from harbor.config import get_settings
from harbor.importer.extractor import load_seed
from harbor.importer.service import PrototypeImporter
from harbor.services.database import async_session_maker

logger = logging.getLogger(__name__)


async def run_import(
    document_path: Path,
    session_factory: async_sessionmaker[AsyncSession] = async_session_maker,
) -> int:
    """Import the prototype at ``document_path``; return the process exit code."""
    settings = get_settings()

    try:
        seed = load_seed(document_path, settings.seed_variable)
        print("Found:", seed.counts())

        async with session_factory() as db:
            importer = PrototypeImporter(db, import_tag=settings.import_tag)
            summary = await importer.import_seed(seed)

        logger.info(f"Created {summary.total_created} engagements")
        print("Import complete.")
        return 0
    except Exception as e:
        logger.debug("Import aborted", exc_info=True)
        print(f"Import failed: {e}", file=sys.stderr)
        return 1
