"""
Configuration loader for the COVID country report.
Loads YAML config and provides typed access to settings.
"""
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from YAML file.
    
    Args:
        config_path: Path to config file. Defaults to config/config_default.yaml
        
    Returns:
        Dictionary containing all configuration settings
    """
    if config_path is None:
        config_path = get_project_root() / "config" / "config_default.yaml"
    else:
        config_path = Path(config_path)
    
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)
    
    return config


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


def get_countries(cfg: Dict[str, Any]) -> List[str]:
    """Return the configured target countries, requiring exactly two."""
    countries = cfg.get('processing', {}).get('countries')
    if not countries:
        raise ValueError("Missing processing.countries in config.")
    if len(countries) != 2:
        raise ValueError(f"processing.countries must name two countries, got {countries}")
    return list(countries)
