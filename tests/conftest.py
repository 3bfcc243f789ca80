"""
Shared fixtures for Tube Joint Designer tests.

Provides reusable tubes, scenes and controllers with a controllable angle
selector.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class AngleSelector:
    """Stand-in for the externally owned angle dropdown"""

    def __init__(self, value="Free"):
        self.value = value

    def __call__(self):
        return self.value


@pytest.fixture
def angle_selector():
    """Angle selector starting in Free mode"""
    return AngleSelector()


@pytest.fixture
def controller(angle_selector):
    """Fresh controller over an empty scene, seeded history"""
    from services.interaction import InteractionController
    return InteractionController(angle_mode_provider=angle_selector)


@pytest.fixture
def default_tube():
    """Default 200 x 50 x 5 tube centred at (500, 400)"""
    from models.tube import Tube
    return Tube(500, 400, 200, 50, 5)


@pytest.fixture
def scene_with_two_tubes():
    """Scene with tube A below tube B, overlapping at the origin"""
    from models.scene import Scene
    from models.tube import Tube
    scene = Scene()
    a = Tube(0, 0, 100, 100, 100)  # solid
    b = Tube(0, 0, 40, 40, 100)  # solid, on top
    scene.add_tube(a)
    scene.add_tube(b)
    return scene, a, b
