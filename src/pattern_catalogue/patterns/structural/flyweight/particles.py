"""Particle system - shared intrinsic sprite state, per-particle extrinsic state."""
from dataclasses import dataclass
from typing import Dict, List

from pattern_catalogue.domain.base.exceptions import UnknownTypeError
from pattern_catalogue.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParticleType:
    """Intrinsic state shared by every particle of one kind."""
    kind: str
    texture_name: str
    sprite_data: str

    def render(self, x: float, y: float, size: float, color: str) -> None:
        print(
            f"Rendering {self.kind} at ({x:.1f}, {y:.1f}) size {size:.1f} "
            f"color {color} using texture '{self.texture_name}'"
        )
        print(f"  Sprite data: {self.sprite_data}")


# Intrinsic state known to the factory, keyed by particle kind
SPRITES: Dict[str, tuple] = {
    "bullet": ("bullet.png", "bullet_sprite_data"),
    "missile": ("missile.png", "missile_sprite_data"),
}


class ParticleFactory:
    """Interns ParticleType objects so each kind is created once."""

    def __init__(self):
        self._flyweights: Dict[str, ParticleType] = {}

    def get(self, kind: str) -> ParticleType:
        """
        Return the shared ParticleType for kind, creating it on first request.

        Raises:
            UnknownTypeError: If the kind has no sprite
        """
        flyweight = self._flyweights.get(kind)
        if flyweight is not None:
            print(f"Reusing existing flyweight for type: {kind}")
            return flyweight

        if kind not in SPRITES:
            raise UnknownTypeError(f"Unknown particle type: {kind}", kind)
        print(f"Creating new flyweight for type: {kind}")
        texture_name, sprite_data = SPRITES[kind]
        flyweight = ParticleType(kind, texture_name, sprite_data)
        self._flyweights[kind] = flyweight
        logger.debug("Flyweight interned", kind=kind, total=len(self._flyweights))
        return flyweight

    def count(self) -> int:
        return len(self._flyweights)


class Particle:
    """Extrinsic state: position, velocity, size and colour."""

    def __init__(self, x: float, y: float, vx: float, vy: float, size: float,
                 color: str, particle_type: ParticleType):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.size = size
        self.color = color
        self.type = particle_type

    def update(self, dt: float) -> None:
        self.x += self.vx * dt
        self.y += self.vy * dt

    def render(self) -> None:
        self.type.render(self.x, self.y, self.size, self.color)


class GameWorld:
    def __init__(self):
        self.factory = ParticleFactory()
        self.particles: List[Particle] = []

    def add_particle(self, kind: str, x: float, y: float, vx: float, vy: float,
                     size: float, color: str) -> Particle:
        particle = Particle(x, y, vx, vy, size, color, self.factory.get(kind))
        self.particles.append(particle)
        return particle

    def update(self, dt: float) -> None:
        for particle in self.particles:
            particle.update(dt)

    def render(self) -> None:
        print(f"\nRendering {len(self.particles)} particles:")
        for index, particle in enumerate(self.particles, start=1):
            print(f"Particle {index}: ", end="")
            particle.render()
