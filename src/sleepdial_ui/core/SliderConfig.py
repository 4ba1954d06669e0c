from dataclasses import dataclass

from sleepdial_ui.core.clock import DEGREES_PER_DAY, HOURS_PER_DAY


@dataclass(frozen=True)
class SliderConfig:
    """Geometry and behaviour constants of one slider, fixed at construction."""
    radius: float = 130.0
    knob_radius: float = 20.0
    # Smallest selectable duration in hours, enforced by the guarded setters
    min_duration_hours: float = 1.0
    # 24 hours in 10 minute blocks
    count_steps: int = 24 * 60 // 10

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise ValueError(f"Invalid radius {self.radius}. Must be positive.")

        if self.knob_radius <= 0:
            raise ValueError(f"Invalid knob_radius {self.knob_radius}. Must be positive.")

        if not 0 <= self.min_duration_hours < HOURS_PER_DAY:
            raise ValueError(
                f"Invalid min_duration_hours {self.min_duration_hours}. "
                f"Must be in [0, {HOURS_PER_DAY})."
            )

        if self.count_steps <= 0:
            raise ValueError(f"Invalid count_steps {self.count_steps}. Must be positive.")

    @property
    def diameter(self) -> float:
        return self.radius * 2

    @property
    def knob_diameter(self) -> float:
        return self.knob_radius * 2

    @property
    def min_separation_degrees(self) -> float:
        return self.min_duration_hours * DEGREES_PER_DAY / HOURS_PER_DAY

    @property
    def step_degrees(self) -> float:
        return DEGREES_PER_DAY / self.count_steps
