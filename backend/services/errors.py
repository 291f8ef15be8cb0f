"""
Error types raised by the data store and the vessel filter.

Routes turn VesselFilterError subclasses into JSON responses using the
``status_code`` and ``code`` carried by each class.
"""
from enums import FilterErrorCode


class DataNotLoadedError(RuntimeError):
    """No data snapshot is available yet."""


class FleetNotFoundError(LookupError):
    def __init__(self, fleet_json_id):
        super().__init__(f"Fleet not found: {fleet_json_id}")
        self.fleet_json_id = fleet_json_id


class VesselFilterError(Exception):
    status_code = 400
    code = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.message, "code": self.code.value}


class InvalidParameter(VesselFilterError):
    code = FilterErrorCode.INVALID_PARAMETER


class InvalidOperator(VesselFilterError):
    code = FilterErrorCode.INVALID_OPERATOR


class NoActiveFilter(VesselFilterError):
    code = FilterErrorCode.NO_ACTIVE_FILTER


class ScopeResolutionFailed(VesselFilterError):
    status_code = 502
    code = FilterErrorCode.SCOPE_RESOLUTION_FAILED


class NoMatches(VesselFilterError):
    status_code = 404
    code = FilterErrorCode.NO_MATCHES
