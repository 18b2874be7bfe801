"""Flyweight pattern - many particles sharing a handful of sprite objects."""
from .particles import GameWorld, Particle, ParticleFactory, ParticleType

__all__ = ["GameWorld", "Particle", "ParticleFactory", "ParticleType"]
