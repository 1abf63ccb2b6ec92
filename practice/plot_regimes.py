import os
import sys

import matplotlib.pyplot as plt
import numpy as np

sys.path.append(os.path.abspath("src"))

from spring_animation import SpringAnimation

# 比較三種阻尼: 0.3 會過衝, 1.0 臨界, 2.0 過阻尼
RATIOS = [0.3, 1.0, 2.0]
RESPONSE = 0.5
DT = 1 / 60
DURATION = 2.0


def simulate(damping_ratio, frame_dt=DT):
    anim = SpringAnimation(0.0, response=RESPONSE, damping_ratio=damping_ratio)
    anim.to_value = 100.0

    t = 0.0
    times, values = [0.0], [anim.value]
    anim.start()
    while anim.is_running and t < DURATION:
        anim.tick(frame_dt)
        t += frame_dt
        times.append(t)
        values.append(anim.value)
    return np.array(times), np.array(values)


if __name__ == "__main__":
    fig, (ax, ax_dt) = plt.subplots(1, 2, figsize=(12, 5))

    for ratio in RATIOS:
        t, v = simulate(ratio)
        ax.plot(t, v, label=f"damping_ratio={ratio}")
    ax.axhline(100.0, color="gray", linestyle="--", linewidth=0.8)
    ax.set_xlabel("time (s)")
    ax.set_ylabel("value")
    ax.set_title(f"response={RESPONSE}")
    ax.legend()

    # 掉幀也沒關係: 大 dt 跟小 dt 走在同一條曲線上
    for frame_dt, marker in ((1 / 120, None), (1 / 10, "o"), (1 / 4, "s")):
        t, v = simulate(0.3, frame_dt)
        ax_dt.plot(t, v, marker=marker, label=f"dt={frame_dt:.3f}")
    ax_dt.set_xlabel("time (s)")
    ax_dt.set_title("damping_ratio=0.3, different frame times")
    ax_dt.legend()

    plt.tight_layout()
    plt.show()
