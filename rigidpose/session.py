"""
Pose session module.

Replays a pose script step by step:
    1. Start from the configured initial pose
    2. For each step:
        a. Rotate or translate the object around/along the chosen axes
        b. Derive the follow-camera transform
        c. Measure the object-to-camera distance
        d. Check the object's rotation is still valid at the configured precision
    3. Collect everything in a report

The session never mutates the transforms it records; each step produces new
arrays.
"""

import numpy as np
from typing import List, Optional
from dataclasses import dataclass, field
import logging

from .camera import FollowCamera
from .config import Config, PoseStep
from .formatting import format_matrix
from .transforms import (
    rotate_around_foreign_axes,
    rotate_around_global_axes,
    rotate_around_local_axes,
    transform_for_rotation,
    transform_from,
    translate_along_foreign_axes,
    translate_along_global_axes,
    translate_along_local_axes,
)
from .validation import RotationMatrixError, StructuralError, validate_rotation_matrix
from .vectors import measure_distance

logger = logging.getLogger(__name__)


_OPERATIONS = {
    ('rotate', 'global'): rotate_around_global_axes,
    ('rotate', 'local'): rotate_around_local_axes,
    ('translate', 'global'): translate_along_global_axes,
    ('translate', 'local'): translate_along_local_axes,
}

_FOREIGN_OPERATIONS = {
    'rotate': rotate_around_foreign_axes,
    'translate': translate_along_foreign_axes,
}


@dataclass
class StepResult:
    """Object and camera pose after a single step."""
    index: int
    step: PoseStep
    object_transform: np.ndarray
    camera_transform: np.ndarray
    camera_distance: float
    rotation_valid: bool


@dataclass
class SessionReport:
    """Summary of a replayed pose script."""
    initial_transform: np.ndarray
    results: List[StepResult] = field(default_factory=list)

    @property
    def final_transform(self) -> np.ndarray:
        if not self.results:
            return self.initial_transform
        return self.results[-1].object_transform

    @property
    def final_camera_transform(self) -> Optional[np.ndarray]:
        if not self.results:
            return None
        return self.results[-1].camera_transform

    @property
    def invalid_steps(self) -> List[int]:
        """Indices of steps after which the object rotation failed validation."""
        return [r.index for r in self.results if not r.rotation_valid]

    def render(self, decimal_places: int = 3) -> str:
        """Text report with the object and camera transforms of every step."""
        lines = ["Initial transform:", format_matrix(self.initial_transform, decimal_places)]
        for r in self.results:
            values = ", ".join(format(v, 'g') for v in r.step.values)
            lines.append("")
            lines.append(f"Step {r.index}: {r.step.action} {r.step.axes} ({values})")
            lines.append("Object transform:")
            lines.append(format_matrix(r.object_transform, decimal_places))
            lines.append("Camera transform:")
            lines.append(format_matrix(r.camera_transform, decimal_places))
            lines.append(f"Camera distance: {r.camera_distance:.{max(decimal_places, 0)}f}")
            if not r.rotation_valid:
                lines.append("WARNING: object rotation is no longer a valid rotation matrix")
        return "\n".join(lines)


class PoseSession:
    """
    Applies the steps of a pose script to an object and tracks it with a
    follow camera.

    Example usage:
        config = Config.from_yaml("script.yaml")
        session = PoseSession(config)
        report = session.run()
        print(report.render())
    """

    def __init__(self, config: Config):
        """
        Initialize the session.

        Args:
            config: Loaded pose script
        """
        self.config = config
        self.camera = FollowCamera(config.camera)
        self.initial_transform = transform_from(
            config.initial.rotation, config.initial.translation
        )

        logger.debug(f"Session initialized with {len(config.steps)} steps")

    def apply_step(self, transform: np.ndarray, step: PoseStep) -> np.ndarray:
        """
        Apply one step to a transform.

        Args:
            transform: Current 4x4 object transform
            step: Rotate/translate step

        Returns:
            New 4x4 object transform
        """
        x, y, z = step.values
        if step.axes == 'foreign':
            foreign = transform_for_rotation(step.foreign_rotation)
            return _FOREIGN_OPERATIONS[step.action](transform, x, y, z, foreign)
        return _OPERATIONS[(step.action, step.axes)](transform, x, y, z)

    def _rotation_valid(self, transform: np.ndarray) -> bool:
        try:
            validate_rotation_matrix(transform[:3, :3], self.config.decimal_places)
        except (StructuralError, RotationMatrixError) as e:
            logger.debug(f"Rotation failed validation: {e}")
            return False
        return True

    def run(self) -> SessionReport:
        """
        Replay every step of the script.

        Returns:
            SessionReport with one StepResult per step
        """
        report = SessionReport(initial_transform=self.initial_transform.copy())
        transform = self.initial_transform

        for index, step in enumerate(self.config.steps, start=1):
            transform = self.apply_step(transform, step)
            camera = self.camera.follow(transform)
            result = StepResult(
                index=index,
                step=step,
                object_transform=transform,
                camera_transform=camera,
                camera_distance=measure_distance(transform, camera),
                rotation_valid=self._rotation_valid(transform),
            )
            report.results.append(result)

            logger.debug(
                f"Step {index}: {step.action} {step.axes} {step.values} -> "
                f"position {transform[:3, 3]}"
            )

        if report.invalid_steps:
            logger.warning(f"Rotation invalid after steps: {report.invalid_steps}")

        logger.info(f"Replayed {len(report.results)} steps")
        return report
