# debug.py
from __future__ import annotations
import logging
import os
from typing import Dict, Tuple

LOGGER_NAME = "ENIGMA"

# every stage of the signal path that can be traced
COMPONENTS: Tuple[str, ...] = (
    "keyboard",
    "plugboard",
    "rotor",
    "reflector",
    "stepping",
    "encipher",
)


class Debug:
    _stderr_attached: bool = False          # class-level guard

    def __init__(self, *, log_to: str | None = None) -> None:
        """
        Per-module tracer over the shared "ENIGMA" logger.

        The first instance attaches the stderr handler; later instances reuse
        it. Any instance given `log_to` adds a file handler for that path
        unless one is already attached. Every component starts switched off,
        so an untouched machine logs nothing.
        """
        self.logger = logging.getLogger(LOGGER_NAME)
        if not Debug._stderr_attached:
            Debug._attach(self.logger, logging.StreamHandler())
            self.logger.setLevel(logging.DEBUG)
            self.logger.propagate = False
            Debug._stderr_attached = True
        if log_to:
            self.log_to(log_to)

        self.enabled = True        # global switch
        self.components: Dict[str, bool] = dict.fromkeys(COMPONENTS, False)

    @staticmethod
    def _attach(logger: logging.Logger, handler: logging.Handler) -> None:
        handler.setFormatter(logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(handler)

    def log_to(self, path: str | os.PathLike) -> logging.FileHandler:
        """Also stream messages to *path*; returns the (possibly existing) handler."""
        target = os.path.abspath(path)
        for handler in self.logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == target:
                return handler
        handler = logging.FileHandler(target, encoding="utf-8")
        Debug._attach(self.logger, handler)
        return handler

    # ── logging API ──────────────────────────────────────────────
    def active(self, component: str) -> bool:
        return self.enabled and self.components.get(component, False)

    def log(self, component: str, message: str, *args: object) -> None:
        """Emit `message % args` at DEBUG level if *component* is switched on."""
        if self.active(component):
            self.logger.debug("[%s] " + message, component.upper(), *args)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = False

    def toggle_global(self, state: bool) -> None:
        self.enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return self.components.copy()

    def _require(self, component: str) -> None:
        if component not in self.components:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        on = [k for k, v in self.components.items() if v]
        return f"<Debug enabled={self.enabled} active={on}>"
