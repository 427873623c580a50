import yaml
import pathlib
from typing import Any

DEFAULTS: dict[str, Any] = {
    "stream": {"batch_size": 1000},
    "logging": {"level": "WARNING"},
    "output": {
        "validate_disk_space": True,
        "min_free_gb": 1,
        "avg_row_bytes": 64,
    },
}


class Settings:
    """
    Gestor de configuración centralizado.
    Defaults embebidos -> config/defaults.yaml -> config/main.yaml (usuario).
    """

    def __init__(self, config_dir: str = None):
        if config_dir is None:
            # Asumimos ejecución desde la raíz del proyecto
            self.config_dir = pathlib.Path.cwd() / "config"
        else:
            self.config_dir = pathlib.Path(config_dir)

    def load_defaults(self) -> dict[str, Any]:
        path = self.config_dir / "defaults.yaml"
        if not path.exists():
            return self.merge_configs({}, DEFAULTS)
        return self.merge_configs(DEFAULTS, self._read_yaml(path))

    def load_user_config(self) -> dict[str, Any]:
        path = self.config_dir / "main.yaml"
        if not path.exists():
            return {}
        return self._read_yaml(path)

    def load(self) -> dict[str, Any]:
        return self.merge_configs(self.load_defaults(), self.load_user_config())

    def _read_yaml(self, path: pathlib.Path) -> dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path} debe contener un mapeo YAML")
        return data

    @staticmethod
    def merge_configs(base: dict, override: dict) -> dict:
        """
        Mezcla recursiva de diccionarios de configuración.
        """
        result = base.copy()
        for key, value in override.items():
            if isinstance(value, dict) and key in result and isinstance(result[key], dict):
                result[key] = Settings.merge_configs(result[key], value)
            elif isinstance(value, dict):
                result[key] = Settings.merge_configs({}, value)
            else:
                result[key] = value
        return result
