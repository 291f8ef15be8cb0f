from enum import Enum

# Logical vessel fields searchable through /api/vessels/filter
class VesselField(str, Enum):
    NAME = "name"
    FLAG = "flag"
    MMSI = "mmsi"

# How per-field results combine for /api/vessels/filter
class Combinator(str, Enum):
    AND = "and"
    OR = "or"

# Error kinds returned in the "code" field of filter error responses
class FilterErrorCode(str, Enum):
    INVALID_PARAMETER = "invalid_parameter"
    INVALID_OPERATOR = "invalid_operator"
    NO_ACTIVE_FILTER = "no_active_filter"
    SCOPE_RESOLUTION_FAILED = "scope_resolution_failed"
    NO_MATCHES = "no_matches"
