from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..catalog.models import WineRecord


class FieldChange(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    field: str
    old_val: str = Field(..., alias="oldVal")
    new_val: str = Field(..., alias="newVal")


class AddedWine(BaseModel):
    kind: Literal["added"] = "added"
    wine: WineRecord
    included: bool = True


class RemovedWine(BaseModel):
    kind: Literal["removed"] = "removed"
    wine: WineRecord
    included: bool = True


class ChangedWine(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["changed"] = "changed"
    wine: WineRecord
    existing_wine: WineRecord = Field(..., alias="existingWine")
    field_changes: list[FieldChange] = Field(..., alias="fieldChanges")
    included: bool = True


class UnchangedWine(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: Literal["unchanged"] = "unchanged"
    wine: WineRecord
    existing_wine: WineRecord = Field(..., alias="existingWine")


DiffEntry = Union[AddedWine, RemovedWine, ChangedWine, UnchangedWine]


class DiffSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    added: int
    removed: int
    changed: int
    unchanged: int
    has_changes: bool = Field(..., alias="hasChanges")


class MenuDiff(BaseModel):
    added: list[AddedWine] = Field(default_factory=list)
    removed: list[RemovedWine] = Field(default_factory=list)
    changed: list[ChangedWine] = Field(default_factory=list)
    unchanged: list[UnchangedWine] = Field(default_factory=list)

    def summary(self) -> DiffSummary:
        return DiffSummary(
            added=len(self.added),
            removed=len(self.removed),
            changed=len(self.changed),
            unchanged=len(self.unchanged),
            has_changes=bool(self.added or self.removed or self.changed),
        )


class OperationAction(str, Enum):
    add = "add"
    update = "update"
    delete = "delete"


class MenuOperation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    action: OperationAction
    wine_id: str | None = Field(default=None, alias="wineId")
    wine: WineRecord | None = None

    @model_validator(mode="after")
    def _check_payload(self) -> MenuOperation:
        if self.action in (OperationAction.add, OperationAction.update) and self.wine is None:
            raise ValueError(f"{self.action.value} operation needs a wine")
        if self.action in (OperationAction.update, OperationAction.delete) and not self.wine_id:
            raise ValueError(f"{self.action.value} operation needs a wineId")
        return self


# ── Request / response bodies ─────────────────────────────────────────────


class MenuDiffRequest(BaseModel):
    wines: list[dict[str, Any]] = Field(default_factory=list)


class MenuDiffResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    restaurant_id: str = Field(..., alias="restaurantId")
    diff: MenuDiff
    summary: DiffSummary
    operations: list[MenuOperation]


class ApplyOperationsRequest(BaseModel):
    operations: list[MenuOperation]


class ApplyOperationsResponse(BaseModel):
    applied: int
    count: int
