"""
Settlement engine.

Pure functions over an already fetched snapshot of an occasion:

    raw records -> compute_balances -> suggest_transfers

Nothing here touches the database, so the same functions back the HTTP
routes, the services and the tests.
"""
from app.engine.balances import compute_balances
from app.engine.transfers import suggest_transfers
from app.engine.stats import (
    compute_occasion_stats,
    compute_person_stats,
    compute_subgroup_stats,
)

__all__ = [
    "compute_balances",
    "suggest_transfers",
    "compute_occasion_stats",
    "compute_person_stats",
    "compute_subgroup_stats",
]
