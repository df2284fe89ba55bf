"""Configuration for five-card draw."""

from config.settings import Config, GameConfig, SimulationConfig, load_config, save_config

__all__ = ["Config", "GameConfig", "SimulationConfig", "load_config", "save_config"]
