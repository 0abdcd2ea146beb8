from __future__ import annotations

from dataclasses import dataclass

INVALID_DIMENSION = "invalid_dimension"
MIXED_AXIS_TYPES = "mixed_datapoints_types"
INVALID_POSITION_TYPE = "invalid_x_type"
INVALID_VALUE_TYPE = "invalid_y_type"

ERROR_KINDS = (
    INVALID_DIMENSION,
    MIXED_AXIS_TYPES,
    INVALID_POSITION_TYPE,
    INVALID_VALUE_TYPE,
)


@dataclass(frozen=True)
class ChartError:
    kind: str
    message: str

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class SparklineError(ValueError):
    def __init__(self, kind: str, message: str) -> None:
        if kind not in ERROR_KINDS:
            raise ValueError(f"unknown chart error kind: {kind}")
        super().__init__(f"{kind}: {message}")
        self.kind = kind
        self.message = message

    def to_error(self) -> ChartError:
        return ChartError(kind=self.kind, message=self.message)
