import pytest

from cavegen.cave import CaveConfig, CaveGenerator, ConfigurationError, apply_env_overrides


def test_defaults_are_valid():
    cfg = CaveConfig()
    assert cfg.validate() is cfg


@pytest.mark.parametrize(
    "field,value",
    [
        ("width", 0),
        ("height", -3),
        ("fill_percent", 101),
        ("fill_percent", -1),
        ("smoothing_iterations", -1),
        ("wall_threshold", -1),
        ("room_threshold", -5),
        ("passage_radius", -1),
        ("border_size", -2),
        ("width", True),
        ("height", "10"),
        ("fill_percent", 47.5),
        ("connect_rooms", "yes"),
        ("use_random_seed", 1),
        ("seed", 1234),
    ],
)
def test_invalid_values_rejected(field, value):
    cfg = CaveConfig(**{field: value})
    with pytest.raises(ConfigurationError) as exc:
        cfg.validate()
    assert exc.value.field == field


def test_boundary_values_accepted():
    CaveConfig(width=1, height=1, fill_percent=0, smoothing_iterations=0, wall_threshold=0,
               room_threshold=0, passage_radius=0, border_size=0).validate()
    CaveConfig(fill_percent=100).validate()


def test_generator_validates_before_running(monkeypatch):
    from cavegen.cave import pipeline

    def boom(*_a, **_k):
        raise AssertionError("stage ran with invalid config")

    monkeypatch.setattr(pipeline, "random_fill", boom)
    with pytest.raises(ConfigurationError):
        CaveGenerator(CaveConfig(width=0))


def test_env_overrides():
    env = {
        "CAVEGEN_WIDTH": "32",
        "CAVEGEN_FILL_PERCENT": " 40 ",
        "CAVEGEN_CONNECT_ROOMS": "no",
        "CAVEGEN_ENABLE_METRICS": "1",
        "CAVEGEN_SEED": "abc",
        "UNRELATED": "x",
    }
    cfg = apply_env_overrides(CaveConfig(), env)
    assert cfg.width == 32
    assert cfg.fill_percent == 40
    assert cfg.connect_rooms is False
    assert cfg.enable_metrics is True
    assert cfg.seed == "abc"
    assert cfg.height == CaveConfig().height


def test_env_override_bad_int():
    with pytest.raises(ConfigurationError) as exc:
        apply_env_overrides(CaveConfig(), {"CAVEGEN_HEIGHT": "tall"})
    assert exc.value.field == "height"


def test_generator_from_env(monkeypatch):
    monkeypatch.setenv("CAVEGEN_WIDTH", "24")
    monkeypatch.setenv("CAVEGEN_HEIGHT", "18")
    monkeypatch.setenv("CAVEGEN_BORDER_SIZE", "2")
    gen = CaveGenerator.from_env(seed="env")
    assert (gen.config.width, gen.config.height) == (24, 18)
    result = gen.generate()
    assert result.grid.size == (28, 22)
    assert result.seed == "env"
