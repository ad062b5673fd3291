"""
Configuration module for pose scripts.

Handles loading and validation of pose scripts from YAML files. A pose
script names a starting pose, follow-camera offsets and an ordered list of
rotate/translate steps.
"""

import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional
import logging

from .formatting import DEFAULT_DECIMAL_PLACES
from .validation import validate_rotation_matrix

logger = logging.getLogger(__name__)

ACTIONS = ('rotate', 'translate')
AXES = ('global', 'local', 'foreign')

_IDENTITY_ROTATION = [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]


@dataclass
class FollowSettings:
    """Offsets of the follow camera from the tracked object."""
    behind: float = 3.0  # Units behind the object, along its ideal Y axis
    above: float = 1.0   # Units above the object, along the global Z axis


@dataclass
class InitialPose:
    """Starting pose of the object before any step is applied."""
    rotation: List[List[float]] = field(default_factory=lambda: [list(row) for row in _IDENTITY_ROTATION])
    translation: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])


@dataclass
class PoseStep:
    """
    A single rotate or translate step.

    Attributes:
        action: 'rotate' (values in degrees) or 'translate' (values in units)
        axes: 'global', 'local' or 'foreign'
        values: X, Y, Z components
        foreign_rotation: 3x3 rotation supplying the axes when axes is 'foreign'
    """
    action: str
    axes: str
    values: List[float]
    foreign_rotation: Optional[List[List[float]]] = None

    def __post_init__(self):
        if self.action not in ACTIONS:
            raise ValueError(f"Unknown step action '{self.action}', expected one of {ACTIONS}")
        if self.axes not in AXES:
            raise ValueError(f"Unknown step axes '{self.axes}', expected one of {AXES}")
        if len(self.values) != 3:
            raise ValueError(f"Step values must have 3 components, got {len(self.values)}")
        self.values = [float(v) for v in self.values]
        if self.axes == 'foreign' and self.foreign_rotation is None:
            raise ValueError("Step with foreign axes requires 'foreign_rotation'")


@dataclass
class Config:
    """
    Main configuration class for a pose script.

    Attributes:
        decimal_places: Precision for validation and rounded equality
        display_decimal_places: Precision for printed matrices
        camera: Follow camera offsets
        initial: Starting pose of the object
        steps: Ordered steps applied to the object
    """
    decimal_places: int = DEFAULT_DECIMAL_PLACES
    display_decimal_places: int = DEFAULT_DECIMAL_PLACES
    camera: FollowSettings = field(default_factory=FollowSettings)
    initial: InitialPose = field(default_factory=InitialPose)
    steps: List[PoseStep] = field(default_factory=list)

    def validate(self) -> None:
        """
        Validate the rotations named in the script.

        Raises:
            StructuralError: If a rotation is not a 3x3 matrix
            RotationMatrixError: If a rotation has a non-unit row or column
        """
        validate_rotation_matrix(self.initial.rotation, self.decimal_places)
        for step in self.steps:
            if step.foreign_rotation is not None:
                validate_rotation_matrix(step.foreign_rotation, self.decimal_places)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Build and validate a configuration from parsed YAML data."""
        cam_data = data.get('camera') or {}
        camera = FollowSettings(
            behind=float(cam_data.get('behind', 3.0)),
            above=float(cam_data.get('above', 1.0)),
        )

        initial_data = data.get('initial') or {}
        initial = InitialPose(
            rotation=initial_data.get('rotation', [list(row) for row in _IDENTITY_ROTATION]),
            translation=[float(v) for v in initial_data.get('translation', [0.0, 0.0, 0.0])],
        )
        if len(initial.translation) != 3:
            raise ValueError(
                f"Initial translation must have 3 components, got {len(initial.translation)}"
            )

        steps = []
        for index, step_data in enumerate(data.get('steps') or []):
            try:
                steps.append(PoseStep(
                    action=step_data['action'],
                    axes=step_data.get('axes', 'global'),
                    values=step_data['values'],
                    foreign_rotation=step_data.get('foreign_rotation'),
                ))
            except KeyError as e:
                raise ValueError(f"Step {index + 1} is missing required key {e}") from e

        config = cls(
            decimal_places=int(data.get('decimal_places', DEFAULT_DECIMAL_PLACES)),
            display_decimal_places=int(data.get('display_decimal_places', DEFAULT_DECIMAL_PLACES)),
            camera=camera,
            initial=initial,
            steps=steps,
        )
        config.validate()
        return config

    @classmethod
    def from_yaml(cls, config_path: str) -> "Config":
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML pose script

        Returns:
            Config object with loaded parameters

        Example YAML structure:
            decimal_places: 3
            display_decimal_places: 3
            camera:
              behind: 3.0
              above: 1.0
            initial:
              rotation: [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
              translation: [0, 0, 0]
            steps:
              - action: rotate
                axes: global
                values: [0, 0, -30]
              - action: rotate
                axes: local
                values: [0, -40, 0]
              - action: translate
                axes: foreign
                values: [4, 0, 0]
                foreign_rotation: [[0, 1, 0], [-1, 0, 0], [0, 0, 1]]
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        logger.info(f"Loading configuration from {config_path}")

        return cls.from_dict(data)

    def to_yaml(self, config_path: str) -> None:
        """Save configuration to a YAML file."""
        steps = []
        for step in self.steps:
            step_data = {
                'action': step.action,
                'axes': step.axes,
                'values': list(step.values),
            }
            if step.foreign_rotation is not None:
                step_data['foreign_rotation'] = [
                    [float(v) for v in row] for row in step.foreign_rotation
                ]
            steps.append(step_data)

        data = {
            'decimal_places': self.decimal_places,
            'display_decimal_places': self.display_decimal_places,
            'camera': {
                'behind': self.camera.behind,
                'above': self.camera.above,
            },
            'initial': {
                'rotation': [[float(v) for v in row] for row in self.initial.rotation],
                'translation': [float(v) for v in self.initial.translation],
            },
            'steps': steps,
        }

        with open(config_path, 'w') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Configuration saved to {config_path}")
