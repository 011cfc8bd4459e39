# -*- coding: utf-8 -*-
import math

import numpy as np
from numvec.math.vector3d import Vector3d
from numvec.math.vector import Vector
from numvec.math.basis import i_hat, j_hat, k_hat


def test_vector3d_ops():
    a = Vector3d(1, 2, 3)
    b = Vector3d(4, -1, 0)
    assert (a + b).as_np().tolist() == [5, 1, 3]
    assert (a - b).as_np().tolist() == [-3, 3, 3]
    assert (a * 2).as_np().tolist() == [2, 4, 6]
    assert (2 * a).as_np().tolist() == [2, 4, 6]
    assert (a / 2).as_np().tolist() == [0.5, 1, 1.5]


def test_vector3d_geometry():
    a = Vector3d(1, 2, 3)
    b = Vector3d(4, 5, 6)
    assert a.cross(b).to_tuple() == (-3.0, 6.0, -3.0)
    assert a.dot(b) == 32
    assert np.isclose(a.magnitude(), 3.7416573)


def test_basis_cross():
    assert i_hat().cross(j_hat()) == k_hat()
    assert j_hat().cross(k_hat()) == i_hat()
    assert k_hat().cross(i_hat()) == j_hat()


def test_vector_ops():
    a = Vector([1, 2, 3, 4])
    b = Vector([4, 3, 2, 1])
    assert (a + b).as_np().tolist() == [5, 5, 5, 5]
    assert a.dot(b) == 20
    assert math.isclose(a.angle_rad(a), 0.0, abs_tol=1e-6)
