"""
F1 car setup simulator

Setup decorators adjust the car's stats; behaviour decorators add pit stop
planning, lap time estimates and a printable summary. ``upgrade_turbo``
recomposes the car, so every setup decorator is applied again on top of the
upgraded stats.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Iterable, List, Mapping

from ..core import Bedazzled, Recompose, bedazzle

BASE_CAR: Dict[str, Any] = {
    "upgrades": [],
    "name": "Base Car",
    "top_speed": 300,
    "acceleration": 8,
    "cornering": 6,
    "tire_wear": 5,
    "fuel_usage": 5,
}


def _with_upgrade(upgrades: Iterable[str], upgrade: str) -> List[str]:
    return list(dict.fromkeys([*(upgrades or []), upgrade]))


def _with_name_suffix(name: str, part: str) -> str:
    return name if part in name else f"{name} + {part}"


def with_soft_tires(car: Bedazzled, recompose: Recompose) -> Dict[str, Any]:
    return {
        "upgrades": _with_upgrade(car.upgrades, "Soft Tires"),
        "cornering": car.cornering + 2,
        "acceleration": car.acceleration - 0.3,
        "tire_wear": car.tire_wear + 2,
    }


def with_high_downforce(car: Bedazzled, recompose: Recompose) -> Dict[str, Any]:
    return {
        "upgrades": _with_upgrade(car.upgrades, "High Downforce"),
        "name": _with_name_suffix(car.name, "High Downforce"),
        "cornering": car.cornering + 3,
        "top_speed": car.top_speed - 15,
        "fuel_usage": car.fuel_usage + 1,
    }


def with_race_engine(car: Bedazzled, recompose: Recompose) -> Dict[str, Any]:
    return {
        "upgrades": _with_upgrade(car.upgrades, "Race Engine"),
        "name": _with_name_suffix(car.name, "Race Engine"),
        "top_speed": car.top_speed + 20,
        "acceleration": car.acceleration - 0.5,
        "fuel_usage": car.fuel_usage + 2,
    }


def with_pit_stop_strategy(car: Bedazzled, recompose: Recompose) -> Dict[str, Callable]:
    def plan_pit_stops(laps: int = 50) -> Dict[str, int]:
        """Plan stops from how many laps the tires and fuel last."""
        tire_limit = math.floor(100 / car.tire_wear)
        fuel_limit = math.floor(100 / car.fuel_usage)
        tire_stops = math.ceil(laps / tire_limit)
        fuel_stops = math.ceil(laps / fuel_limit)
        return {
            "laps": laps,
            "tire_stops": tire_stops,
            "fuel_stops": fuel_stops,
            "total_stops": max(tire_stops, fuel_stops),
        }

    return {"plan_pit_stops": plan_pit_stops}


def with_lap_time_calculator(car: Bedazzled, recompose: Recompose) -> Dict[str, Callable]:
    def estimate_lap_time(track: Mapping) -> float:
        """Estimate a lap time in seconds for a track of ``length`` km and ``turns``."""
        base_time = track["length"] * 60
        speed_factor = 300 / car.top_speed
        accel_factor = car.acceleration / 10
        corner_factor = track["turns"] / (car.cornering + 1)
        lap_time = base_time * (0.4 * speed_factor + 0.2 * accel_factor + 0.4 * corner_factor)
        return round(lap_time, 1)

    return {"estimate_lap_time": estimate_lap_time}


def with_turbo_upgrade(car: Bedazzled, recompose: Recompose) -> Dict[str, Callable]:
    def upgrade_turbo(level: int = 1) -> Bedazzled:
        return recompose({
            **car,
            "upgrades": _with_upgrade(car.upgrades, f"Turbo Lv{level}"),
            "top_speed": car.top_speed + level * 5,
            "acceleration": car.acceleration - level * 0.2,
            "fuel_usage": car.fuel_usage + level * 0.5,
        })

    return {"upgrade_turbo": upgrade_turbo}


def _stat(value: float) -> str:
    return f"{round(value, 2):g}"


def with_summary(car: Bedazzled, recompose: Recompose) -> Dict[str, Callable]:
    def summary() -> None:
        print(f"🚗 {car.name}")
        if car.upgrades:
            print("  Upgrades:       " + ", ".join(car.upgrades))
        print(f"  Top Speed:      {_stat(car.top_speed)} km/h")
        print(f"  Acceleration:   0-100 in {_stat(car.acceleration)}s")
        print(f"  Cornering Grip: {_stat(car.cornering)}")
        print(f"  Tire Wear:      {_stat(car.tire_wear)}/10")
        print(f"  Fuel Usage:     {_stat(car.fuel_usage)}/10")

    return {"summary": summary}


CAR_DECORATORS = (
    with_soft_tires,
    with_high_downforce,
    with_race_engine,
    with_pit_stop_strategy,
    with_lap_time_calculator,
    with_turbo_upgrade,
    with_summary,
)


def build_car(state: Mapping = BASE_CAR) -> Bedazzled:
    """Compose a race car with the full setup and behaviours."""

    return bedazzle(state, *CAR_DECORATORS)


def main(
    turbo_level: int = 2,
    laps: int = 50,
    track_length: float = 5.8,
    track_turns: int = 18,
) -> int:
    car = build_car()
    if turbo_level:
        car = car.upgrade_turbo(turbo_level)
    car.summary()

    strategy = car.plan_pit_stops(laps)
    print(
        f"Pit strategy: {strategy['laps']} laps, {strategy['tire_stops']} tire stop(s), "
        f"{strategy['fuel_stops']} fuel stop(s), {strategy['total_stops']} total"
    )

    lap_time = car.estimate_lap_time({"length": track_length, "turns": track_turns})
    print(f"Estimated lap time: {lap_time} s")
    return 0
