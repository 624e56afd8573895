from dataclasses import dataclass, fields, replace
from typing import Optional

from .timers import Scheduler, ThreadTimerScheduler


@dataclass(frozen=True)
class UnderbarConfig:
    """process-wide defaults for the operations that need an outside capability"""
    scheduler: Scheduler = None
    random_state: Optional[int] = None

    def __post_init__(self):
        if self.scheduler is None:
            # frozen dataclass, so bypass __setattr__ for the default
            object.__setattr__(self, 'scheduler', ThreadTimerScheduler())


_config = UnderbarConfig()


def get_config() -> UnderbarConfig:
    """return the active configuration"""
    return _config


def configure(**changes) -> UnderbarConfig:
    """
    replace fields of the active configuration and return the new one.
    example: configure(scheduler=VirtualScheduler(), random_state=7)
    """
    global _config
    known = {f.name for f in fields(UnderbarConfig)}
    unknown = sorted(set(changes) - known)
    if unknown:
        raise TypeError(f"unknown config field(s): {', '.join(unknown)}")
    _config = replace(_config, **changes)
    return _config


def reset_config() -> UnderbarConfig:
    """restore the defaults (fresh thread timer scheduler, no random seed)"""
    global _config
    _config = UnderbarConfig()
    return _config
