import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False  # per-step lines for every settled node / accepted edge
    stream: Literal["stdout", "stderr"] = "stdout"


# ----------------- SHORTEST PATH ---------------------


class PathQueueModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["path_queue"] = "path_queue"


class DistanceTableModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["distance_table"] = "distance_table"


ShortestPathUnion = Annotated[
    PathQueueModel | DistanceTableModel,
    Field(discriminator="kind"),
]

# ----------------- SPANNING FOREST ---------------------


class BucketForestModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["buckets"] = "buckets"


class UnionFindForestModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["union_find"] = "union_find"


SpanningForestUnion = Annotated[
    BucketForestModel | UnionFindForestModel,
    Field(discriminator="kind"),
]

# ----------------- MAPS ---------------------


class MapModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file: str
    fmt: Literal["standard", "columnar", "auto"] = "auto"
    # columnar connection lines only
    second_city_col: int = 15
    cost_col: int = 30

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))

    @field_validator("second_city_col", "cost_col")
    def _positive(cls, v: int, info: ValidationInfo) -> int:
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @model_validator(mode="after")
    def _column_order(self):
        if self.cost_col <= self.second_city_col:
            raise ValueError(
                f"cost_col ({self.cost_col}) must come after second_city_col "
                f"({self.second_city_col})"
            )
        return self


class SelectionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    radius: float = 6.0  # map units around a node that still select it

    @field_validator("radius")
    @classmethod
    def _radius(cls, v: float) -> float:
        if not v > 0:
            raise ValueError("radius must be > 0")
        return v


# ------------------------------------------------------------------


class SessionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "pathfinder"
    log: LogModel = LogModel()
    shortest_path: ShortestPathUnion = Field(default_factory=PathQueueModel)
    spanning_forest: SpanningForestUnion = Field(default_factory=BucketForestModel)
    selection: SelectionModel = SelectionModel()
    map: MapModel | None = None
