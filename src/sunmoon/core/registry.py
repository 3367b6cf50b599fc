from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .errors import UnknownPhaseError
from .types import CustomSunPhase, PhaseLike, SunPhase

logger = logging.getLogger(__name__)

TimeRow = Tuple[float, str, str]  # (angle_deg, rise_name, set_name)

STANDARD_TIMES: Tuple[TimeRow, ...] = (
    (-0.833, "sunrise", "sunset"),
    (-0.5, "sunrise_end", "sunset_start"),
    (-6.0, "dawn", "dusk"),
    (-12.0, "nautical_dawn", "nautical_dusk"),
    (-18.0, "night_end", "night"),
    (6.0, "golden_hour_end", "golden_hour"),
)

# names the standard rows resolve to without building a custom phase
_NAMED_PHASES: Dict[str, SunPhase] = {
    "sunrise": SunPhase.SUNRISE,
    "sunset": SunPhase.SUNSET,
    "sunrise_end": SunPhase.SUNRISE_END,
    "sunset_start": SunPhase.SUNSET_START,
    "dawn": SunPhase.DAWN,
    "dusk": SunPhase.DUSK,
    "nautical_dawn": SunPhase.NAUTICAL_DAWN,
    "nautical_dusk": SunPhase.NAUTICAL_DUSK,
    "night_end": SunPhase.NIGHT_END,
    "night": SunPhase.NIGHT,
    "golden_hour_end": SunPhase.GOLDEN_HOUR_END,
    "golden_hour": SunPhase.GOLDEN_HOUR,
}

# keys of sun_times() output that are not phase crossings
RESERVED_NAMES = ("solar_noon", "nadir")


@dataclass
class PhaseTable:
    """Ordered (angle_deg, rise_name, set_name) rows used by sun_times()."""
    _rows: List[TimeRow] = field(default_factory=lambda: list(STANDARD_TIMES))

    def rows(self) -> Tuple[TimeRow, ...]:
        return tuple(self._rows)

    def names(self) -> List[str]:
        out: List[str] = []
        for _, rise_name, set_name in self._rows:
            out += [rise_name, set_name]
        return out

    def add_time(self, angle_deg: float, rise_name: str, set_name: str, *, overwrite: bool = False) -> None:
        """
        Append a row. With overwrite=True a row whose names are exactly
        {rise_name, set_name} is replaced; a row sharing only one of them is
        never split, so that clash raises KeyError either way.
        """
        if rise_name == set_name:
            raise ValueError(f"rise and set names must differ, got '{rise_name}' twice")
        for name in (rise_name, set_name):
            if name in RESERVED_NAMES:
                raise KeyError(f"'{name}' is reserved.")

        clashes = [i for i, (_, r, s) in enumerate(self._rows) if {r, s} & {rise_name, set_name}]
        if clashes and not overwrite:
            raise KeyError(f"Time '{rise_name}'/'{set_name}' already exists. Use overwrite=True to replace.")
        partial = [self._rows[i] for i in clashes if {self._rows[i][1], self._rows[i][2]} != {rise_name, set_name}]
        if partial:
            raise KeyError(f"Time '{rise_name}'/'{set_name}' overlaps row {partial[0]} on one name only.")
        for i in reversed(clashes):
            logger.debug("replacing sun time row %s", self._rows[i])
            del self._rows[i]

        self._rows.append((float(angle_deg), rise_name, set_name))
        logger.debug("added sun time row %s at %.3f deg", (rise_name, set_name), angle_deg)

    def phase(self, name: str) -> PhaseLike:
        for angle_deg, rise_name, set_name in self._rows:
            if name in (rise_name, set_name):
                is_rise = name == rise_name
                known = _NAMED_PHASES.get(name)
                if known is not None and known.value == (angle_deg, is_rise):
                    return known
                return CustomSunPhase(angle_deg, is_rise)
        raise UnknownPhaseError(f"Unknown sun phase '{name}'. Available: {sorted(self.names())}")
