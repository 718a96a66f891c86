"""Noise generators for each classifier archetype"""
from .engine_noise import EngineNoiseGenerator
from .broadband_noise import BroadbandNoiseGenerator
from .wind_noise import WindNoiseGenerator
from .noise_mixer import ArchetypeNoiseGenerator
