"""Smart 3DOF Rig Core"""
__version__ = "0.1.0"

from src.core.event_bus import EventBus, RigEvent
from src.core.event_types import EventTypes
from src.core.rig import (
    AngleThresholds,
    Curve,
    OrientationFrame,
    PositionConstraint,
    SourceWeightSink,
    WeightEvaluator,
    evaluate_weight,
)

__all__ = [
    "EventBus",
    "RigEvent",
    "EventTypes",
    "AngleThresholds",
    "Curve",
    "OrientationFrame",
    "PositionConstraint",
    "SourceWeightSink",
    "WeightEvaluator",
    "evaluate_weight",
]
