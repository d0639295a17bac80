"""
SQLite asset store.

Persists the catalogue in a local SQLite file:
- Schema versioning with in-place migrations
- Batch writes inside a single transaction
- Insertion order preserved through a rowid-backed ordinal
"""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional

from ..types import Asset
from .base import AssetStore

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


class SQLiteAssetStore(AssetStore):
    """
    Persistent asset storage using a local SQLite file.

    Assets are stored as their JSON document plus the indexed facets the
    scenario and search queries filter on.
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self._init_db()

    @contextmanager
    def _connection(self):
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA synchronous=NORMAL")
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_db(self) -> None:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        with self._connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS schema_version (
                    version INTEGER PRIMARY KEY,
                    applied_at TEXT NOT NULL,
                    description TEXT
                )
            """)
            current_version = self._get_schema_version_internal(conn)
            if current_version < SCHEMA_VERSION:
                self._migrate(conn, current_version)

    def _get_schema_version_internal(self, conn: sqlite3.Connection) -> int:
        row = conn.execute("SELECT MAX(version) as v FROM schema_version").fetchone()
        return row["v"] if row and row["v"] else 0

    def _migrate(self, conn: sqlite3.Connection, from_version: int) -> None:
        if from_version < 1:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS assets (
                    ordinal INTEGER PRIMARY KEY AUTOINCREMENT,
                    id TEXT NOT NULL UNIQUE,
                    oilfield TEXT,
                    well_id TEXT,
                    category TEXT,
                    status TEXT,
                    document TEXT NOT NULL
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_assets_oilfield ON assets(oilfield)")
            conn.execute("CREATE INDEX IF NOT EXISTS idx_assets_well ON assets(well_id)")
            conn.execute("CREATE INDEX IF NOT EXISTS idx_assets_status ON assets(status)")
            conn.execute(
                "INSERT INTO schema_version (version, applied_at, description) VALUES (1, ?, 'Initial schema')",
                (datetime.now(timezone.utc).isoformat(),),
            )

    def get_schema_version(self) -> int:
        with self._connection() as conn:
            return self._get_schema_version_internal(conn)

    @staticmethod
    def _row_params(asset: Asset) -> tuple:
        return (
            asset.id,
            asset.oilfield,
            asset.well_id,
            asset.category,
            asset.status.value,
            asset.model_dump_json(by_alias=True),
        )

    def save_asset(self, asset: Asset) -> None:
        """Insert or replace; a replaced asset keeps its ordinal."""
        with self._connection() as conn:
            conn.execute("""
                INSERT INTO assets (id, oilfield, well_id, category, status, document)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    oilfield = excluded.oilfield,
                    well_id = excluded.well_id,
                    category = excluded.category,
                    status = excluded.status,
                    document = excluded.document
            """, self._row_params(asset))

    def save_assets_batch(self, assets: Iterable[Asset]) -> int:
        rows = [self._row_params(a) for a in assets]
        if not rows:
            return 0
        with self._connection() as conn:
            conn.executemany("""
                INSERT INTO assets (id, oilfield, well_id, category, status, document)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    oilfield = excluded.oilfield,
                    well_id = excluded.well_id,
                    category = excluded.category,
                    status = excluded.status,
                    document = excluded.document
            """, rows)
        logger.info("Saved %d assets to %s", len(rows), self.db_path)
        return len(rows)

    def get_all_assets(self) -> List[Asset]:
        with self._connection() as conn:
            rows = conn.execute("SELECT document FROM assets ORDER BY ordinal").fetchall()
        return [Asset.model_validate_json(row["document"]) for row in rows]

    def get_asset_by_id(self, asset_id: str) -> Optional[Asset]:
        with self._connection() as conn:
            row = conn.execute("SELECT document FROM assets WHERE id = ?", (asset_id,)).fetchone()
        return Asset.model_validate_json(row["document"]) if row else None

    def find_by_object(self, object_id: str) -> List[Asset]:
        """
        Assets located on an oilfield or well, via the indexed columns.

        The 5D object axis lives inside the document, so the scenario
        aggregator still scans the full snapshot.
        """
        with self._connection() as conn:
            rows = conn.execute(
                "SELECT document FROM assets WHERE oilfield = ? OR well_id = ? ORDER BY ordinal",
                (object_id, object_id),
            ).fetchall()
        return [Asset.model_validate_json(row["document"]) for row in rows]

    def set_status(self, asset_id: str, status: str) -> Asset:
        """Apply a review workflow transition. Transition order is not checked."""
        asset = self.require_asset(asset_id)
        self.save_asset(Asset.model_validate({**asset.model_dump(), "status": status}))
        return self.require_asset(asset_id)

    def delete_asset(self, asset_id: str) -> bool:
        with self._connection() as conn:
            cursor = conn.execute("DELETE FROM assets WHERE id = ?", (asset_id,))
            return cursor.rowcount > 0

    def clear(self) -> None:
        with self._connection() as conn:
            conn.execute("DELETE FROM assets")

