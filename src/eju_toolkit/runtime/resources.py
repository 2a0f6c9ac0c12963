"""
Module: runtime.resources

Purpose:
    Single-flight loader for the math typesetting engine used by the
    viewer. However many renderers ask for it, the stylesheet and the
    script chain are acquired at most once, and every requester is
    notified exactly once when the last script reports loaded.

Key Classes:
    - ResourceLoader: idle → loading → ready state machine with a callback queue
    - LoadState: The three loader states
    - EngineAssets: Stylesheet URL plus the ordered script chain
    - AssetFetcher: Protocol for the host that actually inserts the tags

Dependencies:
    - enum, dataclasses (std)

Used By:
    - runtime.math_text.MathRenderer
    - runtime.session.ViewerSession

Known Gap:
    There is no error state. If a script never reports loaded, queued
    callbacks are never invoked and math stays untypeset. No timeout,
    no retry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Protocol

logger = logging.getLogger(__name__)

KATEX_VERSION = "0.16.9"
KATEX_CDN = f"https://cdnjs.cloudflare.com/ajax/libs/KaTeX/{KATEX_VERSION}"

ReadyCallback = Callable[[], None]


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"


@dataclass(frozen=True)
class EngineAssets:
    """
    External assets for the typesetting engine.

    Scripts are loaded as a chain: each starts only after the previous one
    signals loaded (auto-render needs the engine core to exist first).
    """

    stylesheet: str = f"{KATEX_CDN}/katex.min.css"
    scripts: tuple[str, ...] = (
        f"{KATEX_CDN}/katex.min.js",
        f"{KATEX_CDN}/contrib/auto-render.min.js",
    )

    def __post_init__(self) -> None:
        if not self.scripts:
            raise ValueError("at least one script is required")


class AssetFetcher(Protocol):
    """Host side of asset loading (inserts <link>/<script> tags)."""

    def add_stylesheet(self, href: str) -> None: ...

    def add_script(self, src: str, on_load: Callable[[], None]) -> None: ...


class ResourceLoader:
    """
    Lazily acquire the typesetting engine exactly once.

    One instance is owned by the viewer's composition root and shared by
    every renderer. ``ensure`` is the only mutator.

    Example:
        >>> loader = ResourceLoader(fetcher)
        >>> loader.ensure(lambda: print("ready"))  # starts acquisition
        >>> loader.ensure(lambda: print("also"))   # only queued
    """

    def __init__(self, fetcher: AssetFetcher, assets: EngineAssets | None = None) -> None:
        self._fetcher = fetcher
        self._assets = assets or EngineAssets()
        self._state = LoadState.IDLE
        self._callbacks: List[ReadyCallback] = []

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is LoadState.READY

    @property
    def pending(self) -> int:
        """Number of callbacks waiting for readiness."""
        return len(self._callbacks)

    def ensure(self, on_ready: ReadyCallback) -> None:
        """
        Invoke ``on_ready`` once the engine is available.

        - ready: called immediately, in the same turn
        - loading: queued
        - idle: queued, and the single acquisition sequence starts
        """
        if self._state is LoadState.READY:
            on_ready()
            return

        self._callbacks.append(on_ready)
        if self._state is LoadState.LOADING:
            return

        self._state = LoadState.LOADING
        logger.debug(f"Loading typesetting engine ({len(self._assets.scripts)} scripts)")
        self._fetcher.add_stylesheet(self._assets.stylesheet)
        self._load_script(0)

    def _load_script(self, index: int) -> None:
        scripts = self._assets.scripts
        if index + 1 < len(scripts):
            on_load = lambda: self._load_script(index + 1)
        else:
            on_load = self._mark_ready
        self._fetcher.add_script(scripts[index], on_load)

    def _mark_ready(self) -> None:
        if self._state is LoadState.READY:
            return
        # Ready before flushing: a callback that calls ensure() runs synchronously.
        self._state = LoadState.READY
        callbacks, self._callbacks = self._callbacks, []
        logger.debug(f"Typesetting engine ready, notifying {len(callbacks)} waiter(s)")
        for callback in callbacks:
            callback()
