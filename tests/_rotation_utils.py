"""Rotation helpers to describe expected orientations in tests."""
import numpy as np
from scipy.spatial.transform import Rotation


def rotation_from_angle(axis, angle: float) -> Rotation:
    """Rotation by `angle` (rad) around `axis` (normalized internally)."""
    axis = np.asarray(axis, dtype=float)
    return Rotation.from_rotvec(axis / np.linalg.norm(axis) * angle)


def angle_between(ori: Rotation, ref: Rotation) -> float:
    """Angle of the smallest rotation that transforms ref into ori."""
    return (ori * ref.inv()).magnitude()


def heading_difference(ori: Rotation, ref: Rotation) -> float:
    """Signed angle around the vertical axis of the fixed frame between ref and ori.

    This is the twist part of the swing-twist decomposition of the difference rotation, so roll and pitch differences
    do not contribute.
    """
    quat = (ori * ref.inv()).as_quat()
    angle = 2 * np.arctan2(quat[2], quat[3])
    return (angle + np.pi) % (2 * np.pi) - np.pi
