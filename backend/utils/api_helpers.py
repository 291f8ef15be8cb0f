import logging
from typing import List, Optional

from enums import Combinator, VesselField
from schemas.vessel_filter import FieldFilter, VesselFilterSpec
from services.errors import InvalidParameter, InvalidOperator

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")

OPERATOR_KEYS = ("op", "operator", "logic")
SCOPE_KEY = "fleetJsonId"
NULL_NEEDLE = "null"


def _field_param_names(field: VesselField):
    return field.value, f"{field.value}IsNull", f"{field.value}IsEmpty"


ALLOWED_FILTER_PARAMS = frozenset(
    [name for field in VesselField for name in _field_param_names(field)]
    + list(OPERATOR_KEYS)
    + [SCOPE_KEY]
)


def parse_bool_flag(value) -> bool:
    """
    Interpret a boolean-like query value.

    A bare key (``?nameIsNull``) or an empty value is true, as are
    1/true/yes/on. 0/false/no/off are false. Anything else non-empty is
    treated as true.
    """
    if value is None:
        return False
    v = str(value).strip().lower()
    if v == "" or v in TRUE_VALUES:
        return True
    if v in FALSE_VALUES:
        return False
    return True


def parse_needles(values: List[str]) -> List[str]:
    """Trim and lowercase needle values, dropping empties."""
    needles = []
    for value in values:
        v = (value or "").strip().lower()
        if v:
            needles.append(v)
    return needles


def parse_combinator(args) -> Combinator:
    """Read op/operator/logic (first non-missing wins), defaulting to AND."""
    raw = None
    for key in OPERATOR_KEYS:
        values = [v for v in args.getlist(key) if v is not None and v.strip()]
        if values:
            raw = values[0]
            break
    if raw is None:
        return Combinator.AND
    try:
        return Combinator(raw.strip().lower())
    except ValueError:
        raise InvalidOperator(f"Invalid op '{raw}': expected 'and' or 'or'")


def parse_scope(args) -> Optional[str]:
    for value in args.getlist(SCOPE_KEY):
        if value and value.strip():
            return value.strip()
    return None


def parse_vessel_filter_args(args) -> VesselFilterSpec:
    """
    Parse /api/vessels/filter query args into a VesselFilterSpec.

    Supports:
      - repeated field params: ?name=maersk&name=msc (any needle may match)
      - null/empty flags: ?flagIsNull, ?mmsiIsEmpty=true
      - the literal value ``null`` as shorthand for ``<field>IsNull``
      - op / operator / logic = and | or
      - fleetJsonId to scope the search to one fleet

    Raises InvalidParameter for any unrecognized key and InvalidOperator for
    an op other than and/or.
    """
    unknown = sorted(k for k in args.keys() if k not in ALLOWED_FILTER_PARAMS)
    if unknown:
        logging.info(f"Rejecting vessel filter with unknown params: {unknown}")
        raise InvalidParameter(
            f"Unknown query parameter(s): {', '.join(unknown)}. "
            f"Allowed: {', '.join(sorted(ALLOWED_FILTER_PARAMS))}"
        )

    op = parse_combinator(args)

    field_filters = {}
    for field in VesselField:
        key, null_key, empty_key = _field_param_names(field)
        needles = set(parse_needles(args.getlist(key)))
        is_null = any(parse_bool_flag(v) for v in args.getlist(null_key))
        is_empty = any(parse_bool_flag(v) for v in args.getlist(empty_key))

        if NULL_NEEDLE in needles:
            needles.discard(NULL_NEEDLE)
            is_null = True

        field_filters[field] = FieldFilter(needles=frozenset(needles), is_null=is_null, is_empty=is_empty)

    return VesselFilterSpec(field_filters=field_filters, op=op, fleet_json_id=parse_scope(args))
