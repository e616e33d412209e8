"""Mouse orbit and zoom controls for a camera."""

from __future__ import annotations

import math

ROTATE_SPEED = math.radians(0.4)


class OrbitControls:
    """Turns drags, scrolls and resizes into camera moves.

    Cursor positions are in window coordinates with y growing downwards.
    """

    def __init__(self, camera):
        self.camera = camera
        self.pressed = False
        self._first = True
        self._last_x = 0.0
        self._last_y = 0.0

    def press(self):
        """Start dragging."""
        self.pressed = True

    def release(self):
        """Stop dragging; the next drag starts afresh."""
        self.pressed = False
        self._first = True

    def move(self, x, y):
        """Rotate the camera by the cursor motion while dragging."""
        if not self.pressed:
            return
        if self._first:
            self._last_x, self._last_y = x, y
            self._first = False
            return
        dx = x - self._last_x
        dy = self._last_y - y
        self._last_x, self._last_y = x, y
        self.camera.rotate(ROTATE_SPEED * dx, ROTATE_SPEED * dy)

    def scroll(self, dy):
        """Zoom by the scroll amount."""
        self.camera.zoom(float(dy))

    def resize(self, width, height):
        """Follow a new framebuffer size."""
        self.camera.set_aspect_ratio(width, height)