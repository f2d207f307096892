"""Optical effects attachable to a primitive.

An Effects bundle holds any subset of:
    Phong: Local illumination weights (ambient, diffuse, specular, shininess).
    Mirror: Perfect reflection blended in with coefficient `coeff`.
    Transparency: Refraction through a medium of index `refractive_index`,
        blended in with weight `alpha`.

A primitive without a Phong effect is shaded with LAMBERT, the plain
ambient plus diffuse model with unit weights and no highlight.

Example:
    >>> from src.whitted.materials.effects import Effects, Mirror, Phong
    >>> glossy_mirror = Effects(phong=Phong(), mirror=Mirror(0.8))
"""

from dataclasses import dataclass


def _check_unit_interval(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {value}")


@dataclass(frozen=True)
class Phong:
    """Phong illumination coefficients.

    Attributes:
        shininess: Specular exponent; larger values give tighter highlights.
        specular: Weight of the specular highlight.
        ambient: Weight of the ambient term.
        diffuse: Weight of the diffuse (Lambert) term.
    """

    shininess: float = 10.0
    specular: float = 0.9
    ambient: float = 1.0
    diffuse: float = 1.0

    def validate(self) -> None:
        if not self.shininess >= 0.0:
            raise ValueError(f"phong shininess must be >= 0, got {self.shininess}")
        _check_unit_interval("phong specular", self.specular)
        _check_unit_interval("phong ambient", self.ambient)
        _check_unit_interval("phong diffuse", self.diffuse)


LAMBERT = Phong(shininess=0.0, specular=0.0, ambient=1.0, diffuse=1.0)


@dataclass(frozen=True)
class Mirror:
    """Perfect specular reflection with reflectivity `coeff` in [0, 1]."""

    coeff: float = 1.0

    def validate(self) -> None:
        _check_unit_interval("mirror coefficient", self.coeff)


@dataclass(frozen=True)
class Transparency:
    """Refractive transmission.

    Attributes:
        refractive_index: Index of refraction of the medium (must be > 0).
        alpha: Weight of the transmitted color in [0, 1].
    """

    refractive_index: float
    alpha: float = 1.0

    def validate(self) -> None:
        if not self.refractive_index > 0.0:
            raise ValueError(f"refractive index must be > 0, got {self.refractive_index}")
        _check_unit_interval("transparency alpha", self.alpha)


@dataclass(frozen=True)
class Effects:
    """The set of optical effects on one primitive; every member is optional."""

    phong: Phong | None = None
    mirror: Mirror | None = None
    transparency: Transparency | None = None

    @property
    def shading(self) -> Phong:
        """The Phong coefficients to shade with (LAMBERT when none is set)."""
        return self.phong if self.phong is not None else LAMBERT

    def validate(self) -> None:
        for effect in (self.phong, self.mirror, self.transparency):
            if effect is not None:
                effect.validate()
