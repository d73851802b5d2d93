# /gradebook/services/seed_service.py

"""
Loads a JSON fixture file into an empty store.

The file holds one list per entity type:

    {"classes": [...], "students": [...], "assignments": [...], "grades": [...]}

Records may use either the bundled fixture field names or the hosted record
API names; both go through `record_adapter` first. Identifiers are kept so
that references inside the fixture stay valid, and the id sequences are
resynced afterwards so later creates do not collide with seeded ids.
"""

import json
import logging
from typing import Dict

from .database_helpers import record_adapter
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

# Insert order. References are not enforced, but this keeps ids readable.
SEED_ORDER = (
    ("classes", "class"),
    ("students", "student"),
    ("assignments", "assignment"),
    ("grades", "grade"),
)


def seed_from_dict(fixtures: Dict, db: DatabaseService) -> Dict[str, int]:
    """Inserts every fixture record and returns how many of each were added."""
    adders = {
        "class": db.add_class,
        "student": db.add_student,
        "assignment": db.add_assignment,
        "grade": db.add_grade,
    }
    counts = {}
    for key, entity in SEED_ORDER:
        records = record_adapter.to_models(entity, fixtures.get(key, []))
        for record in records:
            adders[entity](record.model_dump())
        counts[key] = len(records)
    db.sync_id_sequences()
    return counts


def seed_from_file(path: str, db: DatabaseService) -> Dict[str, int]:
    """
    Seeds the store from `path` unless it already holds data. Returns the
    per-collection insert counts (empty when nothing was loaded).
    """
    snapshot = db.load_snapshot()
    if snapshot.students or snapshot.classes or snapshot.grades or snapshot.assignments:
        logger.info("Store already populated; skipping seed file %s", path)
        return {}

    with open(path, "r", encoding="utf-8") as f:
        fixtures = json.load(f)

    counts = seed_from_dict(fixtures, db)
    logger.info("Seeded gradebook from %s: %s", path, counts)
    return counts
