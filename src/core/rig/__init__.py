"""뷰포인트 리그 Core 패키지 — 공개 API"""

from src.core.rig.models import (
    AngleThresholds,
    ConstraintSource,
    EvaluatedWeight,
    OrientationFrame,
)
from src.core.rig.calculations import (
    angle_between,
    axis_alignment,
    combine_alignment,
    evaluate_weight,
    inverse_lerp,
    weight_from_angles,
)
from src.core.rig.curves import (
    Curve,
    Keyframe,
    KeyframeCurve,
    LinearCurve,
    LookupTableCurve,
    PiecewiseLinearCurve,
    default_ease_curve,
    get_curve,
)
from src.core.rig.constraint import PositionConstraint
from src.core.rig.sink import DEFAULT_EPSILON, SourceWeightSink
from src.core.rig.evaluator import WeightEvaluator

__all__ = [
    "AngleThresholds",
    "ConstraintSource",
    "EvaluatedWeight",
    "OrientationFrame",
    "angle_between",
    "axis_alignment",
    "combine_alignment",
    "evaluate_weight",
    "inverse_lerp",
    "weight_from_angles",
    "Curve",
    "Keyframe",
    "KeyframeCurve",
    "LinearCurve",
    "LookupTableCurve",
    "PiecewiseLinearCurve",
    "default_ease_curve",
    "get_curve",
    "PositionConstraint",
    "DEFAULT_EPSILON",
    "SourceWeightSink",
    "WeightEvaluator",
]
