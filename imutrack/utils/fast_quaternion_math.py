"""Quaternion operations on single (4,) arrays compiled with numba.

Quaternions are stored scalar last, i.e. as (x, y, z, w), which is the convention of
:class:`~scipy.spatial.transform.Rotation`.
Applying the product `a * b` to a vector first applies `b` and then `a`.
"""
import numpy as np
from numba import njit

# Relative threshold below which two vectors are treated as exactly antiparallel
_ANTIPARALLEL_EPS = 1e-12


@njit()
def multiply(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Hamilton product of two quaternions."""
    ax, ay, az, aw = a[0], a[1], a[2], a[3]
    bx, by, bz, bw = b[0], b[1], b[2], b[3]
    return np.array(
        [
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
            aw * bw - ax * bx - ay * by - az * bz,
        ]
    )


@njit()
def conjugate(q: np.ndarray) -> np.ndarray:
    """Conjugate of a quaternion (the inverse rotation for unit quaternions)."""
    return np.array([-q[0], -q[1], -q[2], q[3]])


@njit()
def normalize(v: np.ndarray) -> np.ndarray:
    """Scale a vector or quaternion to unit length.

    Zero length input is returned as is.
    """
    length = np.sqrt(np.sum(v**2))
    if length == 0.0:
        return v
    return v / length


@njit()
def rotate_vector(q: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Apply the rotation of a unit quaternion to a 3D vector."""
    u = q[:3]
    t = 2.0 * np.cross(u, v)
    return v + q[3] * t + np.cross(u, t)


@njit()
def quat_from_rotvec(rotvec: np.ndarray) -> np.ndarray:
    """Exponential map from a rotation vector (axis times angle in rad) to a unit quaternion.

    A zero vector maps to the identity.
    """
    angle = np.sqrt(np.sum(rotvec**2))
    if angle == 0.0:
        return np.array([0.0, 0.0, 0.0, 1.0])
    out = np.empty(4)
    out[:3] = rotvec * (np.sin(0.5 * angle) / angle)
    out[3] = np.cos(0.5 * angle)
    return out


@njit()
def orthogonal_axis(v: np.ndarray) -> np.ndarray:
    """Unit vector orthogonal to v.

    This is the cross product with the x-axis, or with the y-axis in case v is parallel to x.
    """
    x_axis = np.array([1.0, 0.0, 0.0])
    if np.abs(np.dot(normalize(v), x_axis)) > 1.0 - 1e-8:
        return normalize(np.cross(v, np.array([0.0, 1.0, 0.0])))
    return normalize(np.cross(v, x_axis))


@njit()
def find_shortest_rotation_quat(v1: np.ndarray, v2: np.ndarray) -> np.ndarray:
    """Quaternion of the smallest rotation that turns the direction of v1 into the direction of v2.

    The rotation axis is the cross product of both vectors, so it is always orthogonal to v1 and v2.
    If one of the vectors has zero length, the identity is returned.
    For exactly antiparallel vectors a half-turn around :func:`orthogonal_axis` of v1 is returned.
    """
    n1 = np.sqrt(np.sum(v1**2))
    n2 = np.sqrt(np.sum(v2**2))
    if n1 == 0.0 or n2 == 0.0:
        return np.array([0.0, 0.0, 0.0, 1.0])
    # Unnormalized quaternion of the rotation: (v1 x v2, |v1||v2| + v1 . v2)
    half_way = np.empty(4)
    half_way[:3] = np.cross(v1, v2)
    half_way[3] = n1 * n2 + np.dot(v1, v2)
    length = np.sqrt(np.sum(half_way**2))
    if length <= _ANTIPARALLEL_EPS * n1 * n2:
        axis = orthogonal_axis(v1)
        return np.array([axis[0], axis[1], axis[2], 0.0])
    return half_way / length
