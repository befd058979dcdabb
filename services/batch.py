"""Batch evaluation service.

Runs the calculation engine over many dwelling descriptions in a thread pool
and collects one flat row per dwelling into a pandas DataFrame, in input
order. Intended for portfolio screening and regression comparisons; the
engine itself stays free of pandas.
"""

from __future__ import annotations

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, Optional, Union

import pandas as pd

from config.settings import configure_logging, load_settings
from core.engine import compute_dpe, compute_dpe_from_dict
from core.models import DpeResult, Dwelling, InsufficientData
from core.tables import DEFAULT_TABLES, MethodTables

logger = logging.getLogger(__name__)

DwellingInput = Union[Dwelling, dict]

COLUMNS = [
    "dwelling",
    "insufficient_data",
    "error",
    "reference_floor_area",
    "grade",
    "primary_energy_index",
    "primary_energy_grade",
    "ghg_index",
    "ghg_grade",
    "cost_range_low",
    "cost_range_high",
    "annual_cost",
    "occupants_estimate",
    "final_energy_heating",
    "final_energy_dhw",
    "final_energy_aux",
    "heating_need",
    "dhw_need",
    "h_total",
    "bridge_total",
    "heating_generator",
    "dhw_generator",
    "reliability_score",
    "fallback_count",
]

# Kept as object columns so a missing value reads back as None on any pandas
TEXT_COLUMNS = (
    "dwelling",
    "error",
    "grade",
    "primary_energy_grade",
    "ghg_grade",
    "heating_generator",
    "dhw_generator",
)


def _label(item: DwellingInput, position: int) -> str:
    if isinstance(item, dict):
        return str(item.get("id") or item.get("name") or position)
    return str(position)


def _evaluate_one(item: DwellingInput, tables: MethodTables) -> Union[DpeResult, InsufficientData]:
    if isinstance(item, Dwelling):
        return compute_dpe(item, tables)
    return compute_dpe_from_dict(item, tables)


def _row(label: str, outcome: Any) -> dict[str, Any]:
    row: dict[str, Any] = {col: None for col in COLUMNS}
    row["dwelling"] = label
    row["insufficient_data"] = False

    if isinstance(outcome, Exception):
        row["error"] = str(outcome)
        return row
    if isinstance(outcome, InsufficientData):
        row["insufficient_data"] = True
        row["reference_floor_area"] = outcome.reference_floor_area
        return row

    result: DpeResult = outcome
    row.update({
        "reference_floor_area": result.reference_floor_area,
        "grade":                result.grade,
        "primary_energy_index": result.primary_energy_index,
        "primary_energy_grade": result.primary_energy_grade,
        "ghg_index":            result.ghg_index,
        "ghg_grade":            result.ghg_grade,
        "cost_range_low":       result.cost_range_low,
        "cost_range_high":      result.cost_range_high,
        "annual_cost":          result.annual_cost,
        "occupants_estimate":   result.occupants_estimate,
        "final_energy_heating": result.final_energy_heating,
        "final_energy_dhw":     result.final_energy_dhw,
        "final_energy_aux":     result.final_energy_aux,
        "heating_need":         result.heating_need,
        "dhw_need":             result.dhw_need,
        "h_total":              result.h_total,
        "bridge_total":         result.bridge_total,
        "heating_generator":    result.heating_generator.value,
        "dhw_generator":        result.dhw_generator.value,
        "reliability_score":    result.reliability["score"],
        "fallback_count":       len(result.fallbacks),
    })
    return row


def evaluate_batch(
    dwellings: Iterable[DwellingInput],
    max_workers: Optional[int] = None,
    tables: MethodTables = DEFAULT_TABLES,
) -> pd.DataFrame:
    """Evaluate every dwelling and return one row per input, in order.

    A dwelling rejected with ValueError gets a row carrying the message in
    the ``error`` column; the rest of the batch is still evaluated.
    """
    items = list(dwellings)
    if max_workers is None:
        max_workers = load_settings().batch_workers
    logger.info("Evaluating %d dwellings with %d workers", len(items), max_workers)

    def run(item: DwellingInput) -> Any:
        try:
            return _evaluate_one(item, tables)
        except ValueError as exc:
            logger.warning("Dwelling rejected: %s", exc)
            return exc

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        outcomes = list(executor.map(run, items))

    rows = [_row(_label(item, i), outcome) for i, (item, outcome) in enumerate(zip(items, outcomes))]
    frame = pd.DataFrame(rows, columns=COLUMNS)
    for col in TEXT_COLUMNS:
        frame[col] = pd.Series([row[col] for row in rows], index=frame.index, dtype=object)
    logger.info("Batch done: %d results, %d insufficient, %d rejected",
                sum(isinstance(o, DpeResult) for o in outcomes),
                sum(isinstance(o, InsufficientData) for o in outcomes),
                sum(isinstance(o, Exception) for o in outcomes))
    return frame


def load_dwellings(path: str) -> list[dict]:
    """Read a JSON file holding one dwelling object or a list of them."""
    with open(path, encoding="utf-8") as fh:
        payload = json.load(fh)
    if isinstance(payload, dict):
        return [payload]
    if isinstance(payload, list) and all(isinstance(item, dict) for item in payload):
        return payload
    raise ValueError(f"{path}: expected a dwelling object or a list of dwelling objects.")


def evaluate_file(path: str, max_workers: Optional[int] = None) -> pd.DataFrame:
    """Entry point for a portfolio file: applies the logging settings, then evaluates."""
    settings = configure_logging()
    return evaluate_batch(load_dwellings(path), max_workers=max_workers or settings.batch_workers)
