# ═══════════════════════════════════════════════════════════════════════════════
# OpenDPE Estimator — Final / Primary Energy Converter
# © 2026 Aparajita Parihar. All rights reserved.
#
# Turns the heating and DHW needs into final energy through the generator
# efficiencies, then into primary energy, CO₂ emissions and annual cost
# through the per-fuel factors. Auxiliary electricity is added as a flat
# per-m² allowance.
# ═══════════════════════════════════════════════════════════════════════════════

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from config.constants import (
    AUX_ELECTRICITY_KWH_M2,
    COST_BAND_HIGH_FACTOR,
    COST_BAND_LOW_FACTOR,
)
from core.models import DhwGenerator, DhwSystem, Fuel, HeatingGenerator, HeatingSystem
from core.tables import DEFAULT_TABLES, Generator, MethodTables
from core.utils import round_half_up, safe_ratio

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedGenerator:
    code: Union[HeatingGenerator, DhwGenerator]
    efficiency: float
    fuel: Fuel
    defaulted: bool = False


@dataclass(frozen=True)
class EnergyBalance:
    heating_generator: ResolvedGenerator
    dhw_generator: ResolvedGenerator
    final_heating: float  # kWh / year
    final_dhw: float
    final_aux: float
    primary_by_use: dict[str, float]  # kWhep / year
    primary_energy_per_m2: float  # unrounded
    ghg_per_m2: float  # unrounded, kgCO₂ / m² / year
    annual_cost: float

    @property
    def primary_energy_index(self) -> int:
        return int(round_half_up(self.primary_energy_per_m2))

    @property
    def ghg_index(self) -> float:
        return round_half_up(self.ghg_per_m2, 1)

    @property
    def cost_range(self) -> tuple[int, int]:
        return (
            int(round_half_up(self.annual_cost * COST_BAND_LOW_FACTOR)),
            int(round_half_up(self.annual_cost * COST_BAND_HIGH_FACTOR)),
        )


def _resolved(code, entry: Generator, defaulted: bool = False) -> ResolvedGenerator:
    return ResolvedGenerator(code=code, efficiency=entry.efficiency, fuel=entry.fuel, defaulted=defaulted)


def resolve_heating_generator(
    heating: HeatingSystem,
    tables: MethodTables = DEFAULT_TABLES,
) -> ResolvedGenerator:
    """Catalogue entry of the heating generator, or the unknown-system default."""
    if heating.unknown or heating.generator is None:
        logger.debug("Heating system unknown; using %s", tables.unknown_heating_default.value)
        default = tables.unknown_heating_default
        return _resolved(default, tables.heating_generators[default], defaulted=True)
    entry = tables.heating_generators.get(heating.generator)
    if entry is None:
        logger.warning("Unknown heating generator %r; using %s",
                       heating.generator, tables.unknown_heating_default.value)
        default = tables.unknown_heating_default
        return _resolved(default, tables.heating_generators[default], defaulted=True)
    return _resolved(heating.generator, entry)


def resolve_dhw_generator(
    dhw: DhwSystem,
    heating: ResolvedGenerator,
    tables: MethodTables = DEFAULT_TABLES,
) -> ResolvedGenerator:
    """DHW generator entry; a coupled system borrows the heating generator."""
    code = dhw.generator
    if dhw.unknown or code is None or code not in tables.dhw_generators:
        if code is not None and not dhw.unknown:
            logger.warning("Unknown DHW generator %r; using %s", code, tables.unknown_dhw_default.value)
        code = tables.unknown_dhw_default
        defaulted = True
    else:
        defaulted = False
    entry = tables.dhw_generators[code]
    if entry is None:
        return ResolvedGenerator(
            code=code,
            efficiency=heating.efficiency,
            fuel=heating.fuel,
            defaulted=defaulted,
        )
    return _resolved(code, entry, defaulted)


def convert_energy(
    heating_need: float,
    dhw_need: float,
    reference_area_m2: float,
    heating: HeatingSystem,
    dhw: DhwSystem,
    tables: MethodTables = DEFAULT_TABLES,
) -> EnergyBalance:
    heat_gen = resolve_heating_generator(heating, tables)
    dhw_gen = resolve_dhw_generator(dhw, heat_gen, tables)

    final_heating = heating_need / heat_gen.efficiency
    final_dhw = dhw_need / dhw_gen.efficiency
    final_aux = reference_area_m2 * AUX_ELECTRICITY_KWH_M2

    uses = (
        ("heating", final_heating, tables.fuel_factors[heat_gen.fuel]),
        ("dhw", final_dhw, tables.fuel_factors[dhw_gen.fuel]),
        ("aux", final_aux, tables.fuel_factors[Fuel.ELECTRICITY]),
    )
    primary_by_use = {name: final * factors.primary for name, final, factors in uses}
    emissions = sum(final * factors.co2 for _, final, factors in uses)
    cost = sum(final * factors.price for _, final, factors in uses)

    return EnergyBalance(
        heating_generator=heat_gen,
        dhw_generator=dhw_gen,
        final_heating=final_heating,
        final_dhw=final_dhw,
        final_aux=final_aux,
        primary_by_use=primary_by_use,
        primary_energy_per_m2=safe_ratio(sum(primary_by_use.values()), reference_area_m2),
        ghg_per_m2=safe_ratio(emissions, reference_area_m2),
        annual_cost=cost,
    )
