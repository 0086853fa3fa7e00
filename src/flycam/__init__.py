"""flycam: free-fly camera for interactive 3D renderers.

A yaw/pitch camera model producing depth-``[0, 1]`` view-projection
matrices, and a keyboard / mouse controller that turns raw input
events into per-frame camera motion.
"""

__version__ = "0.1.0"
