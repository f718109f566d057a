"""
Level definitions - the fixed layout of the finite world.
NO UI DEPENDENCIES.
"""
from .generator import WorldContent
from .hazards import Platform, ground_spike, platform_spike
from .physics import WorldBounds


def level_bounds(viewport_width: float, screens: int) -> WorldBounds:
    return WorldBounds(left=0.0, right=float(viewport_width * screens))


def create_finite_level(viewport_width: float, viewport_height: float,
                        ground_y: float, screens: int = 1) -> WorldContent:
    """
    Each screen gets three platforms at different heights, one ground
    spike and one spike hanging under the highest platform.
    """
    content = WorldContent()

    for screen in range(max(1, screens)):
        offset = screen * viewport_width

        low = Platform(x=offset + 100.0, y=viewport_height - 200, width=200.0)
        high = Platform(x=offset + 400.0, y=viewport_height - 300, width=200.0)
        step = Platform(x=offset + 600.0, y=viewport_height - 150, width=200.0)
        content.platforms.extend([low, high, step])

        content.spikes.append(ground_spike(offset + 300.0, ground_y))
        content.spikes.append(platform_spike(offset + 500.0, high))

    return content
