"""
Pipeline stages of the event wrapper.

classify -> normalize -> invoke -> (notify) -> map_response
"""

from event_wrapper.logic.classifier import classify
from event_wrapper.logic.invoker import InvocationError, invoke
from event_wrapper.logic.normalizer import normalize
from event_wrapper.logic.path_utils import PathAssignmentError, set_path
from event_wrapper.logic.response_mapper import StepDescriptorError, map_response

__all__ = [
    "classify",
    "normalize",
    "invoke",
    "map_response",
    "set_path",
    "InvocationError",
    "PathAssignmentError",
    "StepDescriptorError",
]
