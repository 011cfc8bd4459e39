"""
Математический суб‑пакет: Vector3d, Vector, итераторы и фабрики ортов.
"""

from numvec.math.vector3d import Vector3d
from numvec.math.vector import Vector
from numvec.math.iterators import Iter, IntoIter, IterMut, Slot
from numvec.math.basis import zero, i_hat, j_hat, k_hat, vec3, basis

__all__ = [
    "Vector3d",
    "Vector",
    "Iter",
    "IntoIter",
    "IterMut",
    "Slot",
    "zero",
    "i_hat",
    "j_hat",
    "k_hat",
    "vec3",
    "basis",
]
