# debug.py
from __future__ import annotations
import logging
from typing import Dict


class Debug:
    _root_configured: bool = False          # class-level guard

    # shared component map, so a switch flipped by the CLI reaches every module
    _components: Dict[str, bool] = {
        "plugboard":  False,
        "rotor":      False,
        "reflector":  False,
        "stepping":   False,
        "encipher":   False,
        "config":     False,
        "server":     False,
    }

    def __init__(self, name: str = "ENIGMA") -> None:
        self.logger = logging.getLogger(name)
        self.enabled = True        # global switch

    @classmethod
    def setup(cls, *, log_to: str | None = None, level: int = logging.DEBUG) -> None:
        """
        Install the root handlers once. If `log_to` is given, messages also
        stream to that file. Later calls are no-ops.
        """
        if cls._root_configured:
            return
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if log_to:
            handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

        logging.basicConfig(
            level=level,
            format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
        )
        cls._root_configured = True

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if self.enabled and self._components.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    def info(self, message: str) -> None:
        self.logger.info(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self._components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self._components[c] = False

    def toggle(self, component: str) -> None:
        self._require(component)
        self._components[component] = not self._components[component]

    def toggle_global(self, state: bool) -> None:
        """Switch this instance's output on/off at once."""
        self.enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return self._components.copy()

    @classmethod
    def component_names(cls) -> list[str]:
        return list(cls._components)

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in self._components:
            raise ValueError(f"No such component: {component!r}")

    # nicety for `print(dbg)`
    def __repr__(self) -> str:
        active = [k for k, v in self._components.items() if v]
        return f"<Debug enabled={self.enabled} active={active}>"
