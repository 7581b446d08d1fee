"""Batch simulation of independent Hold'em games."""

from simulation.runner import GameRunner, SimulationConfig
from simulation.statistics import SimulationStats

__all__ = ["GameRunner", "SimulationConfig", "SimulationStats"]
