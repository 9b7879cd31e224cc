"""Track the orientation of a rigid body from IMU data.

Roll and pitch are stabilized with a low-pass filtered gravity estimate, yaw is integrated from the gyroscope only.
"""

__version__ = "0.1.0"
