"""
Collection ranking.

Seasonal collections float to the top while their season is running; a
season may wrap the year end (e.g. November to February).
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Tuple

from wallpaper_hub.core.database.entities.collections import Collection
from wallpaper_hub.core.models.io.collections import CollectionRead


def season_state(collection: Collection, month: int) -> Tuple[bool, int]:
    """Whether ``collection`` is in season during ``month`` and its priority.

    Priority is ``100 - |month - start|`` while in season, otherwise 0.
    """
    start, end = collection.season_start_month, collection.season_end_month
    if not collection.is_seasonal or start is None or end is None:
        return False, 0
    if start <= end:
        in_season = start <= month <= end
    else:
        in_season = month >= start or month <= end
    return in_season, (100 - abs(month - start)) if in_season else 0


def rank_collections(collections: List[Collection], counts: Dict[int, int], now: datetime) -> List[CollectionRead]:
    """Collections in display order: seasonal priority, then sort order, then newest."""
    rows = []
    for collection in collections:
        in_season, priority = season_state(collection, now.month)
        read = CollectionRead.model_validate(collection).model_copy(
            update={
                "wallpaper_count": counts.get(collection.id, 0),
                "is_currently_seasonal": in_season,
                "seasonal_priority": priority,
            }
        )
        rows.append(read)
    rows.sort(key=lambda row: row.created_at, reverse=True)
    rows.sort(key=lambda row: (-row.seasonal_priority, row.sort_order))
    return rows
