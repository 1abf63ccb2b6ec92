import arcade
from pubsub import pub

from animator import SpringAnimator
from spring_animation import SpringAnimation
from ValueUtils import map_range
from vector_types import Point

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
SCREEN_TITLE = "Spring Playground"

DOT_TOPIC = "SpringDot"
DOT_RADIUS = 20


class SpringPlayground(arcade.Window):
    """
    左鍵: 移動目標點 (動畫中也可以直接改方向)
    右鍵: 依照滑鼠 x 調整 damping_ratio (左邊 0.1 很彈, 右邊 1.5 很黏)
    空白鍵: 立刻停在目標點
    """

    def __init__(self):
        super().__init__(SCREEN_WIDTH, SCREEN_HEIGHT, SCREEN_TITLE)
        arcade.set_background_color(arcade.color.GREEN)

        center = Point(SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2)
        self.dot_pos = center
        pub.subscribe(self.notify_dot, DOT_TOPIC)

        self.animator = SpringAnimator()
        self.spring = SpringAnimation.from_preset("bouncy", center, topic=DOT_TOPIC)
        self.spring.clamping_range = (Point(0, 0), Point(SCREEN_WIDTH, SCREEN_HEIGHT))
        self.spring.completion = lambda: print(f"resolved at {self.spring.value}")

    def notify_dot(self, value):
        self.dot_pos = value

    def on_draw(self):
        self.clear()
        target = self.spring.to_value
        arcade.draw_circle_outline(target.x, target.y, DOT_RADIUS, arcade.color.WHITE, 2)
        pos = self.dot_pos
        arcade.draw_circle_filled(pos.x, pos.y, DOT_RADIUS, arcade.color.RED)

    def on_mouse_press(self, x, y, button, modifiers):
        if button == arcade.MOUSE_BUTTON_RIGHT:
            ratio = map_range(x, 0, SCREEN_WIDTH, 0.1, 1.5)
            self.spring.configure(response=self.spring.response, damping_ratio=ratio)
            print(f"damping_ratio -> {ratio:.2f} ({self.spring.spring.regime})")
            return

        # Redirect mid-flight: keep the current velocity, just move the target
        self.spring.to_value = Point(x, y)
        self.animator.add(self.spring)

    def on_key_press(self, symbol, modifiers):
        if symbol == arcade.key.SPACE:
            self.spring.stop(resolve_immediately=True, post_value_changed=True)

    def on_update(self, delta_time):
        self.animator.update(delta_time)


if __name__ == "__main__":
    game = SpringPlayground()
    arcade.run()
