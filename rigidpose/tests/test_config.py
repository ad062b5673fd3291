"""
Tests for pose script configuration.
"""

import pytest
import tempfile
from pathlib import Path

import yaml

from rigidpose.config import Config, FollowSettings, InitialPose, PoseStep
from rigidpose.validation import RotationMatrixError, StructuralError


SAMPLE_SCRIPT = """
decimal_places: 4
display_decimal_places: 2
camera:
  behind: 5.0
  above: 2.0
initial:
  rotation: [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
  translation: [1, 2, 3]
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


def write_script(content: str) -> str:
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(content)
        return f.name


class TestPoseStep:
    """Tests for step validation."""

    def test_values_coerced_to_float(self):
        step = PoseStep(action='rotate', axes='local', values=[1, 2, 3])
        assert step.values == [1.0, 2.0, 3.0]
        assert all(isinstance(v, float) for v in step.values)

    def test_unknown_action(self):
        with pytest.raises(ValueError, match="Unknown step action"):
            PoseStep(action='scale', axes='global', values=[1, 1, 1])

    def test_unknown_axes(self):
        with pytest.raises(ValueError, match="Unknown step axes"):
            PoseStep(action='rotate', axes='world', values=[0, 0, 0])

    def test_wrong_value_count(self):
        with pytest.raises(ValueError, match="3 components"):
            PoseStep(action='translate', axes='global', values=[1, 2])

    def test_foreign_requires_rotation(self):
        with pytest.raises(ValueError, match="foreign_rotation"):
            PoseStep(action='rotate', axes='foreign', values=[0, 0, 10])


class TestConfig:
    """Tests for loading and saving pose scripts."""

    @pytest.fixture
    def script_file(self):
        return write_script(SAMPLE_SCRIPT)

    def test_defaults(self):
        config = Config()
        assert config.decimal_places == 3
        assert config.display_decimal_places == 3
        assert config.camera == FollowSettings(behind=3.0, above=1.0)
        assert config.initial == InitialPose()
        assert config.steps == []

    def test_from_yaml(self, script_file):
        config = Config.from_yaml(script_file)

        assert config.decimal_places == 4
        assert config.display_decimal_places == 2
        assert config.camera.behind == 5.0
        assert config.camera.above == 2.0
        assert config.initial.translation == [1.0, 2.0, 3.0]
        assert len(config.steps) == 3
        assert config.steps[1].axes == 'local'
        assert config.steps[1].values == [0.0, -40.0, 0.0]
        assert config.steps[2].foreign_rotation == [[0, 1, 0], [-1, 0, 0], [0, 0, 1]]

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            Config.from_yaml("/nonexistent/script.yaml")

    def test_empty_file(self):
        """An empty script is the default configuration."""
        config = Config.from_yaml(write_script(""))
        assert config.steps == []
        assert config.camera.behind == 3.0

    def test_step_axes_default_to_global(self):
        config = Config.from_dict({'steps': [{'action': 'translate', 'values': [1, 0, 0]}]})
        assert config.steps[0].axes == 'global'

    def test_step_missing_key(self):
        with pytest.raises(ValueError, match="Step 1 is missing required key"):
            Config.from_dict({'steps': [{'action': 'rotate'}]})

    def test_bad_initial_translation(self):
        with pytest.raises(ValueError, match="Initial translation"):
            Config.from_dict({'initial': {'translation': [1, 2]}})

    def test_invalid_initial_rotation(self):
        with pytest.raises(RotationMatrixError):
            Config.from_dict({'initial': {'rotation': [[1, 1, 0], [0, 1, 0], [0, 0, 1]]}})

    def test_malformed_initial_rotation(self):
        with pytest.raises(StructuralError):
            Config.from_dict({'initial': {'rotation': [[1, 0], [0, 1]]}})

    def test_invalid_foreign_rotation(self):
        data = {'steps': [{
            'action': 'rotate',
            'axes': 'foreign',
            'values': [10, 0, 0],
            'foreign_rotation': [[0.5, 0, 0], [0, 1, 0], [0, 0, 1]],
        }]}
        with pytest.raises(RotationMatrixError):
            Config.from_dict(data)

    def test_validation_uses_script_precision(self):
        """A rough rotation passes at 1 decimal place but not at 3."""
        rough = [[0.7, 0.7, 0], [-0.7, 0.7, 0], [0, 0, 1]]
        Config.from_dict({'decimal_places': 1, 'initial': {'rotation': rough}})
        with pytest.raises(RotationMatrixError):
            Config.from_dict({'decimal_places': 3, 'initial': {'rotation': rough}})

    def test_round_trip(self, script_file):
        """Saving and reloading keeps every setting."""
        config = Config.from_yaml(script_file)
        saved = str(Path(tempfile.mkdtemp()) / "saved.yaml")
        config.to_yaml(saved)

        reloaded = Config.from_yaml(saved)
        assert reloaded.decimal_places == config.decimal_places
        assert reloaded.display_decimal_places == config.display_decimal_places
        assert reloaded.camera == config.camera
        assert reloaded.initial.translation == config.initial.translation
        assert [s.values for s in reloaded.steps] == [s.values for s in config.steps]
        assert reloaded.steps[2].foreign_rotation == [[0.0, 1.0, 0.0], [-1.0, 0.0, 0.0], [0.0, 0.0, 1.0]]

    def test_saved_file_is_plain_yaml(self, script_file):
        config = Config.from_yaml(script_file)
        saved = str(Path(tempfile.mkdtemp()) / "saved.yaml")
        config.to_yaml(saved)

        with open(saved) as f:
            data = yaml.safe_load(f)
        assert list(data.keys()) == [
            'decimal_places', 'display_decimal_places', 'camera', 'initial', 'steps'
        ]
        assert 'foreign_rotation' not in data['steps'][0]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
