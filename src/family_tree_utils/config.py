import yaml
from pathlib import Path

DEFAULT_TITLE_CODES = "config/TitleCodesList.txt"


def find_project_root(package_dir: Path = Path(__file__).resolve().parent) -> Path:
    """
    Directory that relative config paths resolve against.

    In a checkout (or editable install) that is the directory holding
    ``config/``; an installed package falls back to the working directory.
    """
    checkout = package_dir.parents[1]
    if (checkout / "config").is_dir():
        return checkout
    return Path.cwd()


PROJECT_ROOT = find_project_root()
CONFIG_PATH = PROJECT_ROOT / "config" / "family_tree_utils.yml"


class FTUConfig:
    def __init__(self, data, root: Path = PROJECT_ROOT):
        self.root = root
        self.paths = data.get("paths", {})
        self.logging = data.get("logging", {})
        self.debug = data.get("debug", False)

    def resolve_path(self, key: str, default: str) -> Path:
        """Return ``paths.<key>`` as an absolute path (relative to the project root)."""
        path = Path(self.paths.get(key) or default)
        if not path.is_absolute():
            path = self.root / path
        return path

    @property
    def title_codes_path(self) -> Path:
        return self.resolve_path("title_codes", DEFAULT_TITLE_CODES)

    @property
    def logs_dir(self) -> Path:
        return self.resolve_path("logs_dir", "logs")


def load_config(path: Path = CONFIG_PATH) -> 'FTUConfig':
    # No config file is fine: every key has a built-in default.
    if not path.exists():
        return FTUConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return FTUConfig(data)

_config_cache = None

def get_config() -> 'FTUConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
