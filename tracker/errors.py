from __future__ import annotations


class TrackerError(Exception):
    """Base class for errors raised by the tracker."""


class ValidationError(TrackerError):
    """A request is missing a required field or carries an unusable value."""


class StoreCorruptError(TrackerError):
    """The backing workouts document cannot be parsed into workout entries."""


class UpstreamEstimationFailure(TrackerError):
    """The external calorie estimate could not be obtained or parsed.

    Always recovered inside the gateway by falling back to the local estimator.
    """
