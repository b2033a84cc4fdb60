"""Named initial configurations.

Each preset is a list of body records. ``mass``, ``x``, ``y``, ``vx`` and
``vy`` describe the physics state; ``color``, ``radius`` and ``name`` are only
read by the renderer.
"""

from . import constants as C

PRESETS = {
    "Three Body": [
        {"name": "Red", "mass": 70.0, "x": -100.0, "y": 0.0, "vx": 0.0, "vy": 0.5, "color": C.RED},
        {"name": "Green", "mass": 100.0, "x": 0.0, "y": 0.0, "vx": 0.0, "vy": 0.0, "color": C.GREEN},
        {"name": "Blue", "mass": 30.0, "x": 100.0, "y": 0.0, "vx": 0.0, "vy": -0.5, "color": C.BLUE},
    ],
    "Binary": [
        {"name": "A", "mass": 100.0, "x": -50.0, "y": 0.0, "vx": 0.0, "vy": -0.5, "color": C.RED},
        {"name": "B", "mass": 100.0, "x": 50.0, "y": 0.0, "vx": 0.0, "vy": 0.5, "color": C.BLUE},
    ],
    "Figure Eight": [
        # Chenciner-Montgomery orbit with lengths and masses scaled by 100; velocities are unchanged.
        {"name": "A", "mass": 100.0, "x": -97.000436, "y": 24.308753, "vx": 0.4662036850, "vy": 0.4323657300, "color": C.RED},
        {"name": "B", "mass": 100.0, "x": 97.000436, "y": -24.308753, "vx": 0.4662036850, "vy": 0.4323657300, "color": C.GREEN},
        {"name": "C", "mass": 100.0, "x": 0.0, "y": 0.0, "vx": -0.93240737, "vy": -0.86473146, "color": C.BLUE},
    ],
}
