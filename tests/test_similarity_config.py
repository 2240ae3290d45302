import pytest

from pyhoops.config import (
    DEFAULT_PRESET,
    FeatureWeight,
    SimilarityConfig,
    get_preset,
    iter_presets,
    load_settings,
)


def test_get_preset_is_case_insensitive():
    config = get_preset("DETAIL")
    assert config.key == "detail"
    assert config.metric == "manhattan"


def test_default_preset_is_profile():
    assert get_preset().key == DEFAULT_PRESET == "profile"
    assert get_preset(None).fields == ("points", "rebounds", "assists", "usage_pct", "ts_pct")


def test_presets_use_different_assist_scales():
    scales = {
        config.key: {feature.field: feature.scale for feature in config.features}
        for config in iter_presets()
    }
    assert scales["profile"]["assists"] == 15.0
    assert scales["detail"]["assists"] == 10.0


def test_preset_weights_sum_to_one():
    for config in iter_presets():
        assert sum(feature.weight for feature in config.features) == pytest.approx(1.0)


def test_get_preset_missing_raises():
    with pytest.raises(KeyError):
        get_preset("vibes")


def test_config_rejects_non_convex_weights():
    with pytest.raises(ValueError):
        SimilarityConfig(
            key="bad",
            label="Bad",
            metric="euclidean",
            features=(FeatureWeight("points", 30.0, 0.6), FeatureWeight("rebounds", 15.0, 0.6)),
        )


def test_config_rejects_non_positive_scale():
    with pytest.raises(ValueError):
        SimilarityConfig(
            key="bad",
            label="Bad",
            metric="manhattan",
            features=(FeatureWeight("points", 0.0, 1.0),),
        )


def test_load_settings_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("PYHOOPS_DATA_PATH", str(tmp_path / "players.csv"))
    monkeypatch.setenv("PYHOOPS_CLUSTERS", "3")
    monkeypatch.setenv("PYHOOPS_NEIGHBORS", "not-a-number")
    monkeypatch.setenv("PYHOOPS_SIMILARITY_PRESET", "Detail")

    settings = load_settings()

    assert settings.data_path == tmp_path / "players.csv"
    assert settings.clusters == 3
    assert settings.neighbors == 5
    assert settings.similarity_preset == "detail"
    assert settings.cluster_seed == 42
