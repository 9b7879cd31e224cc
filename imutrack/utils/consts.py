"""Common constants used in the library."""

import numpy as np

#: The default names of the Gyroscope columns in the sensor frame
SF_GYR = ["gyr_x", "gyr_y", "gyr_z"]
#: The default names of the Accelerometer columns in the sensor frame
SF_ACC = ["acc_x", "acc_y", "acc_z"]
#: The default names of all columns in the sensor frame
SF_COLS = [*SF_ACC, *SF_GYR]

#: The default names of the Orientation columns in the fixed reference frame
GF_ORI = ["q_x", "q_y", "q_z", "q_w"]
#: The default index name of orientation lists
GF_INDEX = ["sample"]

#: Gravity in m/s^2
GRAV = 9.81
#: The "up" direction of the fixed reference frame
UP_VEC = np.array([0.0, 0.0, 1.0])
UP_VEC.flags.writeable = False
#: The gravity vector in m/s^2 as measured by a resting sensor aligned with the fixed frame
GRAV_VEC = GRAV * UP_VEC
GRAV_VEC.flags.writeable = False

#: The identity rotation as (x, y, z, w) quaternion
IDENTITY_QUAT = np.array([0.0, 0.0, 0.0, 1.0])
IDENTITY_QUAT.flags.writeable = False

#: Default decay time constant of the gravity low-pass filter in seconds
DEFAULT_GRAVITY_TIME_CONSTANT_S = 10.0
