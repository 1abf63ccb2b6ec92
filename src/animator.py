class SpringAnimator:
    """
    Ticks a set of spring animations from a single frame callback,
    e.g. arcade.Window.on_update(delta_time). Animations that stop
    (resolved or stopped by hand) are dropped on the next update.
    """

    def __init__(self):
        self._animations = []

    def add(self, animation):
        animation.start()
        if animation not in self._animations:
            self._animations.append(animation)
        return animation

    def remove(self, animation):
        if animation in self._animations:
            self._animations.remove(animation)

    @property
    def running(self):
        return [a for a in self._animations if a.is_running]

    def update(self, dt):
        if dt < 0:
            raise ValueError(f"frame time must be non-negative, got {dt}")

        for anim in self._animations[:]:
            if anim.is_running:
                anim.tick(dt)
        self._animations = [a for a in self._animations if a.is_running]

    def __len__(self):
        return len(self._animations)
