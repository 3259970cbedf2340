"""Window-independent building blocks for simple 2D games."""

__version__ = "0.1.0"

__all__ = [
    "animation",
    "color",
    "coroutines",
    "events",
    "generational",
    "geometry",
    "input",
    "mouse_camera",
    "shaders",
    "state_machine",
    "storage",
]