"""Plugin profiles: which files and directories each extension owns.

Both profiles share the same store implementation and differ only in
names. Layout under a user root, legacy profile:

    v2Settings.json
    v2ExperimentalSamplerPreset/<name>.json
    v2Themes/<name>.json

and current profile:

    NeoSettings.json
    NeoSamplers/<name>.json
    NeoThemes/<name>.json
"""

from dataclasses import dataclass, field

from .collections import CollectionStore
from .settings import SettingsStore


@dataclass(frozen=True)
class Profile:
    id: str
    name: str
    description: str
    settings_file: str
    preset_dir: str
    preset_route: str  # URL segment for the sampler preset collection
    theme_dir: str
    theme_route: str = "themes"
    settings: SettingsStore = field(init=False, compare=False, repr=False)
    presets: CollectionStore = field(init=False, compare=False, repr=False)
    themes: CollectionStore = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        # frozen dataclass: stores are derived once from the names above
        object.__setattr__(self, "settings", SettingsStore(self.settings_file))
        object.__setattr__(self, "presets", CollectionStore(self.preset_dir, "preset"))
        object.__setattr__(
            self, "themes", CollectionStore(self.theme_dir, "theme", require_preset=True)
        )


LEGACY = Profile(
    id="v2",
    name="V2 Server",
    description="Allows you to connect to a V2 server",
    settings_file="v2Settings.json",
    preset_dir="v2ExperimentalSamplerPreset",
    preset_route="v2ExperimentalSamplerPreset",
    theme_dir="v2Themes",
)

NEO = Profile(
    id="neo",
    name="Neo Server",
    description="Stores settings, sampler presets and themes for the Neo frontend",
    settings_file="NeoSettings.json",
    preset_dir="NeoSamplers",
    preset_route="samplers",
    theme_dir="NeoThemes",
)

PROFILES: tuple[Profile, ...] = (LEGACY, NEO)
