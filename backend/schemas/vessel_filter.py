from typing import Dict, FrozenSet, Optional
from pydantic import BaseModel, ConfigDict, Field
from enums import Combinator, VesselField


class FieldFilter(BaseModel):
    model_config = ConfigDict(frozen=True)

    needles: FrozenSet[str] = Field(default_factory=frozenset)  # lowercase, trimmed, non-empty
    is_null: bool = False
    is_empty: bool = False

    @property
    def is_active(self) -> bool:
        return bool(self.needles) or self.is_null or self.is_empty


class VesselFilterSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    field_filters: Dict[VesselField, FieldFilter] = Field(default_factory=dict)
    op: Combinator = Combinator.AND
    fleet_json_id: Optional[str] = None               # scope token

    def field(self, name: VesselField) -> FieldFilter:
        return self.field_filters.get(name) or FieldFilter()

    @property
    def active_fields(self) -> Dict[VesselField, FieldFilter]:
        return {name: entry for name, entry in self.field_filters.items() if entry.is_active}

    @property
    def has_active_fields(self) -> bool:
        return bool(self.active_fields)
