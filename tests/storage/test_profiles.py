"""Tests for the two plugin profiles and their stores."""

import pytest

from userstore import storage


def test_profile_names():
    assert storage.LEGACY.settings.filename == "v2Settings.json"
    assert storage.LEGACY.presets.dirname == "v2ExperimentalSamplerPreset"
    assert storage.LEGACY.themes.dirname == "v2Themes"
    assert storage.NEO.settings.filename == "NeoSettings.json"
    assert storage.NEO.presets.dirname == "NeoSamplers"
    assert storage.NEO.themes.dirname == "NeoThemes"


def test_only_themes_require_preset():
    for profile in storage.PROFILES:
        assert profile.presets.require_preset is False
        assert profile.themes.require_preset is True


@pytest.mark.asyncio
async def test_profiles_use_separate_files(root):
    await storage.LEGACY.settings.write(root, {"v": 2})
    await storage.NEO.presets.put(root, "p", {"a": 1})
    assert await storage.NEO.settings.read(root) == {}
    assert await storage.LEGACY.presets.list(root) == []
    assert sorted(p.name for p in root.iterdir()) == ["NeoSamplers", "v2Settings.json"]
