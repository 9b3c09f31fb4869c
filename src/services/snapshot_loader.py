"""Concurrent loading of the dashboard's source collections.

The dashboard needs payments, utility bills, expenses and monthly reports
before anything can be aggregated; units and tenants are optional and only
feed the occupancy counters. All configured fetches are started together and
awaited together; if any of them fails no snapshot is produced, so aggregation
never runs on partial data.

Fetchers are zero-argument coroutine functions supplied by the caller (an HTTP
client, a database query, a fixture...). Retries belong to the fetchers.
"""

import asyncio
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from pydantic import ValidationError

from src.models.records import (
    Expense,
    MonthlyReport,
    Payment,
    Unit,
    UtilityBill,
    parse_records,
)
from src.services.errors import RecordValidationError, SourceFetchError

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[Iterable[Any]]]


@dataclass(frozen=True)
class SourceFetchers:
    """One fetcher per source collection.

    units and tenants are optional; when both are omitted the snapshot carries
    no occupancy data.
    """

    payments: Fetcher
    utilities: Fetcher
    expenses: Fetcher
    reports: Fetcher
    units: Fetcher | None = None
    tenants: Fetcher | None = None


@dataclass(frozen=True)
class FinancialSnapshot:
    """Fully loaded, parsed source collections."""

    payments: tuple[Payment, ...] = ()
    utilities: tuple[UtilityBill, ...] = ()
    expenses: tuple[Expense, ...] = ()
    reports: tuple[MonthlyReport, ...] = ()
    units: tuple[Unit, ...] | None = None
    tenant_count: int | None = None


_SOURCES = (
    ("payments", Payment),
    ("utilities", UtilityBill),
    ("expenses", Expense),
    ("reports", MonthlyReport),
)
_OPTIONAL_SOURCES = ("units", "tenants")


def _require_collection(name: str, payload: Any) -> Iterable[Any]:
    """Reject payloads that are not a list of records (None, a single object, text)."""
    if payload is None or isinstance(payload, (str, bytes, Mapping)) or not isinstance(
        payload, Iterable
    ):
        logger.error("Malformed %s payload: expected a list, got %s", name, type(payload).__name__)
        raise RecordValidationError(
            f"Malformed {name} payload: expected a list of records, got {type(payload).__name__}"
        )
    return payload


def _parse(name: str, model: type, payload: Any) -> tuple:
    try:
        return tuple(parse_records(model, _require_collection(name, payload)))
    except ValidationError as e:
        logger.error("Malformed %s record: %s", name, e)
        raise RecordValidationError(f"Malformed {name} record: {e}") from e


def build_snapshot(
    payments: Iterable[Any],
    utilities: Iterable[Any],
    expenses: Iterable[Any],
    reports: Iterable[Any],
    units: Iterable[Any] | None = None,
    tenants: Iterable[Any] | None = None,
) -> FinancialSnapshot:
    """Parse raw collections into a snapshot.

    Args:
        payments, utilities, expenses, reports: Raw record collections
        units: Raw units for occupancy counters (optional)
        tenants: Raw tenant records; only their number is kept (optional)

    Raises:
        RecordValidationError: If a payload is not a collection or any record is malformed
    """
    raw = {"payments": payments, "utilities": utilities, "expenses": expenses, "reports": reports}
    parsed: dict[str, Any] = {name: _parse(name, model, raw[name]) for name, model in _SOURCES}

    if units is not None:
        parsed["units"] = _parse("units", Unit, units)
    if tenants is not None:
        parsed["tenant_count"] = len(list(_require_collection("tenants", tenants)))

    return FinancialSnapshot(**parsed)


async def load_snapshot(fetchers: SourceFetchers) -> FinancialSnapshot:
    """Fetch all configured collections concurrently and parse them.

    Args:
        fetchers: Coroutine functions returning each collection's raw records

    Returns:
        FinancialSnapshot with every configured collection loaded

    Raises:
        SourceFetchError: If any fetch failed (chained to the first failure)
        RecordValidationError: If any fetched payload or record is malformed
    """
    names = [name for name, _ in _SOURCES]
    names += [name for name in _OPTIONAL_SOURCES if getattr(fetchers, name) is not None]
    results = await asyncio.gather(
        *(getattr(fetchers, name)() for name in names),
        return_exceptions=True,
    )

    failures = [
        (name, result) for name, result in zip(names, results) if isinstance(result, BaseException)
    ]
    if failures:
        for name, exc in failures:
            logger.error("Failed to load %s: %s", name, exc)
        failed_names = ", ".join(name for name, _ in failures)
        raise SourceFetchError(f"Failed to load financial data: {failed_names}") from failures[0][1]

    for name, result in zip(names, results):
        _require_collection(name, result)

    snapshot = build_snapshot(**dict(zip(names, results)))
    logger.info(
        "Loaded financial snapshot: %d payments, %d utilities, %d expenses, %d reports",
        len(snapshot.payments),
        len(snapshot.utilities),
        len(snapshot.expenses),
        len(snapshot.reports),
    )
    if snapshot.units is not None:
        logger.debug("Loaded %d units for occupancy", len(snapshot.units))
    return snapshot


__all__ = ["Fetcher", "SourceFetchers", "FinancialSnapshot", "build_snapshot", "load_snapshot"]
