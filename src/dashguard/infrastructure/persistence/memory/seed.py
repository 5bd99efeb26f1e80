"""Seed the in-memory store from a JSON file of user records."""

import json
import logging
from pathlib import Path

from dashguard.domain.entities import User

logger = logging.getLogger(__name__)


def load_seed_users(path: str | Path) -> list[User]:
    """Read a JSON array of user records. Records without an id are skipped."""
    records = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(records, list):
        raise ValueError(f"{path}: expected a JSON array of user records")

    users: list[User] = []
    for index, record in enumerate(records):
        if not isinstance(record, dict) or not record.get("id"):
            logger.warning("Skipping seed record %d in %s: missing id", index, path)
            continue
        users.append(User.from_record(record))
    logger.info("Loaded %d seed users from %s", len(users), path)
    return users
