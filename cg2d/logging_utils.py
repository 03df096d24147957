"""Логування для cg2d.

Усі логери живуть у просторі імен 'cg2d' і беруться через get_logger().
Кореневий логер процесу не чіпаємо.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_ROOT = 'cg2d'
_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_root() -> logging.Logger:
    """Лише NullHandler (з __init__) -> замінити на StreamHandler у stdout."""
    root = logging.getLogger(_ROOT)
    if not any(not isinstance(h, logging.NullHandler) for h in root.handlers):
        for h in list(root.handlers):
            root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    return value if isinstance(value, int) else default


def configure_logging(level: Union[str, int] = 'INFO') -> logging.Logger:
    """Рівень для всієї родини логерів 'cg2d' (корінь процесу не змінюється)."""
    root = _ensure_root()
    root.setLevel(_to_level(level))
    return root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Логер під 'cg2d'. Без level — NOTSET, тобто рівень успадковується від 'cg2d'.
    Хендлер тут не додається: до configure_logging() діє NullHandler пакета.
    """
    if name != _ROOT and not name.startswith(_ROOT + '.'):
        name = f'{_ROOT}.{name}'
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
