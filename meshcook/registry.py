"""The table of available geometry operators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

from meshcook.deform import ocean_surface, sine_wave, transform
from meshcook.objimport import import_obj
from meshcook.parameters import (
    Parameter,
    ParmRange,
    ParmTemplate,
    ParmType,
    RangeFlag,
    Value,
)
from meshcook.shapes import Mesh, grid

Values = Mapping[str, tuple[Value, ...]]
Builder = Callable[[Values, Sequence[Mesh]], Mesh]


@dataclass(frozen=True)
class OperatorInfo:
    """An operator: its name, label, parameters, input limits and cook function."""

    name: str
    label: str
    builder: Builder
    parameters: tuple[ParmTemplate, ...] = ()
    min_inputs: int = 0
    max_inputs: int = 0
    outputs: int = 1

    def create_parameters(self) -> dict[str, Parameter]:
        """Fresh parameters holding their defaults, keyed by name."""
        return {template.name: Parameter(template) for template in self.parameters}

    def cook(
        self,
        parameters: Mapping[str, Parameter] | None = None,
        inputs: Sequence[Mesh] = (),
    ) -> Mesh:
        """Run the operator on ``inputs``; parameters not given keep their defaults."""
        inputs = list(inputs)
        if not self.min_inputs <= len(inputs) <= self.max_inputs:
            raise ValueError(
                f"{self.name} takes {self.min_inputs} to {self.max_inputs} inputs,"
                f" got {len(inputs)}"
            )
        live = self.create_parameters()
        for name, parameter in (parameters or {}).items():
            if name not in live:
                raise KeyError(f"{self.name} has no parameter {name!r}")
            live[name] = parameter
        values = {name: parameter.values for name, parameter in live.items()}
        return self.builder(values, inputs)


def _cook_transform(values: Values, inputs: Sequence[Mesh]) -> Mesh:
    return transform(inputs[0], translate=values["translate"], rotate=values["rotate"])


def _cook_import(values: Values, inputs: Sequence[Mesh]) -> Mesh:
    return import_obj(values["filePath"][0], size=values["size"][0])


def _cook_grid(values: Values, inputs: Sequence[Mesh]) -> Mesh:
    return grid(
        size=values["size"],
        rows=values["rows"][0],
        columns=values["columns"][0],
    )


def _cook_sine_wave(values: Values, inputs: Sequence[Mesh]) -> Mesh:
    return sine_wave(
        inputs[0],
        frequency=values["frequency"][0],
        radial=bool(values["radial"][0]),
        center=values["center"],
    )


def _cook_ocean(values: Values, inputs: Sequence[Mesh]) -> Mesh:
    return ocean_surface(inputs[0])


_COUNT_RANGE = ParmRange(1, RangeFlag.LOCKED, 100, RangeFlag.UNLOCKED)


def operator_table() -> dict[str, OperatorInfo]:
    """All registered operators keyed by name, in registration order."""
    operators = (
        OperatorInfo(
            "transform",
            "Transform",
            _cook_transform,
            (
                ParmTemplate(ParmType.XYZ, "translate", "Translate", vector_size=3),
                ParmTemplate(ParmType.XYZ, "rotate", "Rotate", vector_size=3),
            ),
            1,
            1,
            1,
        ),
        OperatorInfo(
            "geometryImport",
            "Geometry Import",
            _cook_import,
            (
                ParmTemplate(ParmType.STRING, "filePath", "File Path"),
                ParmTemplate(ParmType.FLOAT, "size", "Size", default=1.0),
            ),
            0,
            0,
            1,
        ),
        OperatorInfo(
            "grid",
            "Grid",
            _cook_grid,
            (
                ParmTemplate(
                    ParmType.XYZ,
                    "size",
                    "Size",
                    default=10.0,
                    vector_size=2,
                    range=ParmRange(0, RangeFlag.UNLOCKED, 100, RangeFlag.UNLOCKED),
                ),
                ParmTemplate(ParmType.INT, "rows", "Rows", 10, 1, _COUNT_RANGE),
                ParmTemplate(ParmType.INT, "columns", "Columns", 10, 1, _COUNT_RANGE),
            ),
            0,
            0,
            1,
        ),
        OperatorInfo(
            "sineWave",
            "Sine Wave",
            _cook_sine_wave,
            (
                ParmTemplate(ParmType.BOOL, "radial", "Radial Mode"),
                ParmTemplate(ParmType.XYZ, "center", "Center", vector_size=3),
                ParmTemplate(
                    ParmType.FLOAT, "frequency", "Frequency", default=1.0, vector_size=1
                ),
            ),
            1,
            1,
            1,
        ),
        OperatorInfo(
            "oceanSurface",
            "Ocean Surface",
            _cook_ocean,
            (),
            1,
            1,
            1,
        ),
    )
    return {op.name: op for op in operators}