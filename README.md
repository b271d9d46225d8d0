# khanij

A geology and mineralogy library for Python. It covers minerals and hardness scales, rocks and the rock cycle, sediment budgets, the economics of ore deposits, hydrothermal ore formation, groundwater and sediment hydrology, and rock mechanics.

## Installation

```
pip install khanij
```

To run the test suite, install the `test` extra and run pytest:

```
pip install "khanij[test]"
pytest
```

## Modules

- `khanij.mineral`: `Mineral` presets such as `Mineral.quartz()`, `Mineral.diamond()` and `Mineral.topaz()`. It also provides `MohsHardness`, which holds a value between 1 and 10. Out-of-range values raise `ValueError`. `MohsHardness` has `scratches`, `to_vickers` and `to_knoop`, and `MohsHardness.from_vickers` converts back by bisection and raises `ValueError` for a non-positive input. The module also defines the `Luster` and `CrystalSystem` enums.
- `khanij.rock`: `Rock` presets, `RockType` and `GeologicalProcess`. A `Rock` raises `ValueError` if its density is not positive or its porosity lies outside 0–1. `rock_cycle_next` returns the next rock type, or `None` when a process does not apply. For density work there are `bulk_density`, `bulk_density_from_minerals` and `porosity_from_density`.
- `khanij.sediment`: `SedimentSource` and `SedimentSink`, and `compute_budget`, which returns a `BudgetResult`. The module also has `sediment_production`, `transport_capacity`, `sediment_delivery_ratio`, `denudation_rate`, and the `GRAIN_CLASSES` and `GRAIN_DIAMETERS` tables.
- `khanij.ore`: `OreDeposit`, which validates grade, depth and tonnage. It has `contained_metal`, `gross_revenue` and `stripping_ratio`, and `to_dict` / `from_dict` for JSON-ready dictionaries. The module also defines `DepositType`, `ResourceCategory` (ordered from inferred to measured), `TonnageGradePoint` and `tonnage_grade_curve`. Its economic functions are `cutoff_grade`, `is_economically_viable` and `net_present_value`. `cutoff_grade` and `net_present_value` raise `ValueError` for invalid or uneconomic inputs.
- `khanij.hydrothermal`: `HydrothermalConditions`, and `classify_alteration`, which returns an `AlterationZone`. The module also has `metal_solubility`, `precipitation_rate`, `estimated_ore_grade`, and a `PRECIPITATION_TEMPS` table of ore metals.
- `khanij.hydrology`:
  - Fluids: `FluidMaterial` with the `GROUNDWATER` and `LAVA` presets, and `brine` and `sediment_laden`.
  - Grains and bodies in fluid: Stokes settling, grain Reynolds number and `flow_regime`, buoyancy, drag and terminal velocity.
  - Groundwater: `darcy_flow` with the `CONDUCTIVITY` and `STORATIVITY` tables, the Theis `well_function`, Theis and Cooper-Jacob drawdown, and `radius_of_influence`.
  - Sediment transport: the Hjulström curve (`transport_regime`) and the Shields criterion (`shields_parameter`, `is_grain_mobile`).
- `khanij.materials`: `RockMaterial`, with bulk and shear moduli, and presets such as `granite_material()` and `quartzite_material()`. The module computes P- and S-wave velocities, `vp_vs_ratio` and `poisson_from_velocities`. It also gives temperature-corrected velocities, `velocity_depth_profile`, `weathered_material` and `time_to_weathering_failure`.
- `khanij.failure`: `StressTensor`, with principal stresses, maximum shear and hydrostatic stress. The module has Mohr-Coulomb strength, failure and safety factor, and conversion to Drucker-Prager parameters. It also has `classify_failure_mode` (returning a `FailureMode`), `brittle_ductile_transition_depth` and `infinite_slope_safety_factor`.
- `khanij.logsetup`: `init()` configures the `khanij` logger to write to standard output. The level comes from the `KHANIJ_LOG` environment variable, for example `warn`, `debug` or `khanij=info`, and defaults to warnings.

## Example

```python
from khanij.mineral import Mineral, MohsHardness
from khanij.ore import cutoff_grade
from khanij.hydrology import CONDUCTIVITY, darcy_flow, transport_regime

quartz = Mineral.quartz()
hv = quartz.hardness.to_vickers()
recovered = MohsHardness.from_vickers(hv)   # about 7.0

print(cutoff_grade(60_000_000.0, 50.0, 0.90))
print(darcy_flow(CONDUCTIVITY["sandstone"], 0.01, 100.0))  # 1e-6 m³/s
print(transport_regime(0.001, 0.5))                         # TransportRegime.EROSION
```

Quantities are in SI units unless a parameter name says otherwise, for example `depth_m`, `temperature_c` or `catchment_area_km2`. Mineral and rock densities are in g/cm³.

## What it does not do

- There is no command-line program. The package is a library of functions and classes.
- It does not parse mineral formulas, and it does not compute molecular weights, lattice energies or ionic radii. `Mineral.formula` is a plain string.
- It has no fluid-particle simulation. The hydrology module gives closed-form and numerically integrated results only.