import importlib
import pkgutil
from typing import Dict, List, Optional, Tuple

from term2048.config import SimulationConfig
from term2048.controllers.base import Controller

# controller package: variant submodules are imported on first use
__all__ = [m.name for m in pkgutil.iter_modules(__path__) if not m.name.startswith("_")]  # type: ignore[reportUnsupportedDunderAll]

# name -> (submodule, class)
CONTROLLERS: Dict[str, Tuple[str, str]] = {
    "player": ("player", "PlayerController"),
    "random": ("uniform", "RandomController"),
    "simulated": ("simulated", "SimulatedController"),
}
_CLASSES = {cls_name: module for module, cls_name in CONTROLLERS.values()}


def __getattr__(name: str):
    if name in _CLASSES:
        return getattr(load_module(_CLASSES[name]), name)
    if name in __all__:
        return importlib.import_module(f"{__name__}.{name}")
    raise AttributeError(f"{__name__} has no attribute {name!r}")


def __dir__() -> List[str]:
    return sorted(list(globals().keys()) + __all__ + list(_CLASSES))


def available_controllers() -> List[str]:
    return list(CONTROLLERS)


def load_module(name: str):
    if name not in __all__:
        raise ImportError(f"Unknown submodule: {name}")
    return importlib.import_module(f"{__name__}.{name}")


def build_controller(
    name: str,
    simulation: Optional[SimulationConfig] = None,
    seed: Optional[int] = None,
    keys=None,
) -> Controller:
    if name not in CONTROLLERS:
        raise ValueError(f"Unknown controller: {name!r}, expected one of {available_controllers()}")
    module_name, cls_name = CONTROLLERS[name]
    cls = getattr(load_module(module_name), cls_name)
    if name == "player":
        return cls(keys=keys)
    if name == "random":
        return cls(seed=seed)
    return cls.from_config(simulation or SimulationConfig(), seed=seed)
