import logging
import os
from datetime import datetime
from typing import Optional, Union


def _make_log_dir(path: Union[str, os.PathLike]) -> str:
    os.makedirs(path, exist_ok=True)
    return str(path)


def setup_logging(name: str = "prefixcodec", log_dir: Optional[str] = None,
                  level: Union[int, str] = logging.INFO) -> logging.Logger:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if not logging.getLogger().handlers:
        handlers = [logging.StreamHandler()]
        if log_dir:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            handlers.append(logging.FileHandler(os.path.join(_make_log_dir(log_dir), f"run_{timestamp}.log")))
        logging.basicConfig(
            level=level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            handlers=handlers,
        )
    return logging.getLogger(name)
