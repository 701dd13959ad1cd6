"""Machine configuration loaded through OmegaConf."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from omegaconf import OmegaConf


@dataclass
class MachineConfig:
    """Runtime options for a Machine.

    Attributes:
        log_level: Minimum level printed by the execution logger
        use_colors: Colour log levels when stdout is a terminal
        show_timestamps: Prefix log lines with elapsed time
        trace: Log every executed instruction at DEBUG level
        progress: Show a tqdm progress bar in Machine.run
    """
    log_level: str = "INFO"
    use_colors: bool = True
    show_timestamps: bool = True
    trace: bool = False
    progress: bool = False


def load_config(
    source: Optional[Union[str, Path, Dict[str, Any]]] = None, **overrides
) -> MachineConfig:
    """Build a MachineConfig from a YAML file, a dict, or defaults.

    Keyword overrides are merged last. Unknown keys and badly typed values
    raise omegaconf validation errors.
    """
    schema = OmegaConf.structured(MachineConfig)
    if source is None:
        loaded = OmegaConf.create({})
    elif isinstance(source, (str, Path)):
        loaded = OmegaConf.load(source)
    else:
        loaded = OmegaConf.create(source)

    merged = OmegaConf.merge(schema, loaded, OmegaConf.create(overrides))
    return OmegaConf.to_object(merged)
