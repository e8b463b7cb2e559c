"""이벤트 유형 상수"""


class EventTypes:
    """이벤트 유형 문자열 상수"""

    # viewpoint rig
    VIEWPOINT_REGISTERED = "viewpoint_registered"
    VIEWPOINT_UNREGISTERED = "viewpoint_unregistered"
    SOURCE_WEIGHT_CHANGED = "source_weight_changed"
    REFERENCE_MOVED = "reference_moved"
