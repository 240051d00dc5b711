"""Shared dataclasses for hole array generation."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


UNITS = ('inch', 'mm')
DIRECTIONS = ('cw', 'ccw')
STRATEGIES = ('plunge', 'spiral')

# Motion command kinds
RAPID = 'rapid'
FEED = 'feed'
ARC_CW = 'arc_cw'
ARC_CCW = 'arc_ccw'


@dataclass(frozen=True)
class Point:
    """A 2D coordinate point."""
    x: float
    y: float


@dataclass(frozen=True)
class Point3:
    """A 3D coordinate point."""
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Feature:
    """A circular pocket to cut."""
    diameter: float
    depth: float

    @property
    def radius(self) -> float:
        return self.diameter / 2


@dataclass(frozen=True)
class MachiningParameters:
    """Everything needed to generate one hole array program."""
    units: str                  # 'inch' or 'mm'
    tool_diameter: float
    direction: str              # 'cw' or 'ccw'
    stepover_percent: float     # percent of tool diameter
    feed_rate: float            # units/min
    plunge_rate: float          # units/min
    safety_height: float
    strategy: str               # 'plunge' or 'spiral'
    axial_step: float           # depth per axial pass
    origin: Point3
    x_count: int
    y_count: int
    x_spacing: float
    y_spacing: float
    hole: Feature
    counterbore: Optional[Feature] = None

    @property
    def tool_radius(self) -> float:
        return self.tool_diameter / 2

    @property
    def stepover_distance(self) -> float:
        return self.tool_diameter * self.stepover_percent / 100


@dataclass(frozen=True)
class GridPosition:
    """A hole center in the array (column and row are 1-based)."""
    column: int
    row: int
    x: float
    y: float

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class MotionCommand:
    """A single machine move.

    i and j are incremental offsets from the arc start point to the arc center.
    """
    kind: str  # 'rapid', 'feed', 'arc_cw', 'arc_ccw'
    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None
    i: Optional[float] = None
    j: Optional[float] = None
    feed: Optional[float] = None

    @property
    def is_arc(self) -> bool:
        return self.kind in (ARC_CW, ARC_CCW)


@dataclass
class ProgramInfo:
    """Header metadata for a generated program."""
    comment: str = ''
    created: Optional[datetime] = None
