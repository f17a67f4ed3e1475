# motion.py - Movement and Culling
"""
Linear, frame-rate-normalized motion for objects and the runner's lift.
"""

from entities import MovingObject, Player


def advance_runner(objects: list[MovingObject], speed: float, dt: float) -> int:
    """Scroll objects left at the shared speed; drop those fully past the left edge."""
    culled = 0
    for i in range(len(objects) - 1, -1, -1):
        obj = objects[i]
        obj.x -= speed * dt
        if obj.x + obj.width < 0:
            del objects[i]
            culled += 1
    return culled


def advance_catcher(objects: list[MovingObject], dt: float, floor_y: float) -> int:
    """Drop objects at their own speed; remove those past the bottom edge."""
    culled = 0
    for i in range(len(objects) - 1, -1, -1):
        obj = objects[i]
        obj.y += obj.speed * dt
        if obj.y > floor_y:
            del objects[i]
            culled += 1
    return culled


def update_lift(player: Player, held: bool, dt: float, rate: float, z_max: float) -> None:
    """Rise while held, sink while released, same rate both ways (triangular jump)."""
    if held:
        player.z = min(z_max, player.z + rate * dt)
    else:
        player.z = max(0.0, player.z - rate * dt)
