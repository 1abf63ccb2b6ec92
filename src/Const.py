import json
import logging
import math
import os

import numpy as np

logger = logging.getLogger(__name__)

# --- 設定區 ---
# 判斷「停下來」的門檻: 速度與位移每個分量都要小於這個值
RESOLVE_EPSILON = 0.01
# damping_ratio 離 1 這麼近就直接走臨界阻尼公式 (避免 ωd -> 0 除以零)
CRITICAL_DAMPING_EPSILON = 1e-4

DEFAULT_RESPONSE = 0.55
DEFAULT_DAMPING_RATIO = 0.825
DEFAULT_DTYPE = np.float64
# 動畫內部狀態一律用 float64, float32 會卡在最後一個 ulp 停不下來
STATE_DTYPE = np.float64

# (response, damping_ratio)
BUILTIN_PRESETS = {
    "default": (DEFAULT_RESPONSE, DEFAULT_DAMPING_RATIO),
    "snappy": (0.3, 0.9),
    "bouncy": (0.5, 0.4),
    "gentle": (0.8, 1.0),
    "critical": (0.5, 1.0),
    "sluggish": (1.0, 1.6),
}

PRESETS_PATH = os.environ.get("SPRING_PRESETS_PATH", "assets/spring_presets.json")


def load_presets(path=PRESETS_PATH):
    """
    讀取 JSON 格式的 preset 檔案，覆蓋內建的值。
    檔案格式: {"name": {"response": 0.5, "damping_ratio": 0.8}, ...}
    """
    presets = dict(BUILTIN_PRESETS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("no presets file at %s, using built-in presets", path)
        return presets

    for name, cfg in data.items():
        response = float(cfg["response"])
        damping_ratio = float(cfg["damping_ratio"])
        if not math.isfinite(response) or response <= 0.0:
            raise ValueError(f"preset {name!r} in {path}: response must be positive, got {response}")
        if not math.isfinite(damping_ratio) or damping_ratio < 0.0:
            raise ValueError(
                f"preset {name!r} in {path}: damping_ratio must be non-negative, got {damping_ratio}"
            )
        presets[name] = (response, damping_ratio)
    logger.debug("loaded %d presets from %s", len(data), path)
    return presets


SPRING_PRESETS = load_presets()
