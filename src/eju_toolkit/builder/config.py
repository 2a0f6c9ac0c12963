"""
Module: builder.config

Purpose:
    Configuration dataclass for the build pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - BuilderConfig: Main configuration for building the study document

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - builder.controller: Main build controller
    - cli: Command-line entry point
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from eju_toolkit.common.path_utils import resolve_path
from eju_toolkit.builder.merge.merger import MergePolicy
from eju_toolkit.builder.output.injector import DEFAULT_BINDING, DEFAULT_PLACEHOLDER


DEFAULT_DATA_DIR = Path("data")
DEFAULT_OUTPUT_PATH = Path("dist") / "eju-math.jsx"
DEFAULT_TEMPLATE_PATH = Path("template") / "app-template.jsx"


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for building the study document (immutable).

    Attributes:
        data_dir: Directory holding one fragment file per exam paper
        output_path: Where the injected document is written
        template_path: Template containing the placeholder statement
        suffix: Recognised fragment file suffix
        merge_policy: What to do when two fragments share (course, exam key)
        strict_schema: Validate fragments against the full JSON Schema
        binding: Name bound to the database in the template
        placeholder: Placeholder token the binding initially points at

    Example:
        >>> config = BuilderConfig.from_args(data="./my-data")
        >>> config.output_path.name
        'eju-math.jsx'
    """

    data_dir: Path = DEFAULT_DATA_DIR
    output_path: Path = DEFAULT_OUTPUT_PATH
    template_path: Path = DEFAULT_TEMPLATE_PATH
    suffix: str = ".json"
    merge_policy: MergePolicy = MergePolicy.LAST_WRITER_WINS
    strict_schema: bool = False
    binding: str = DEFAULT_BINDING
    placeholder: str = DEFAULT_PLACEHOLDER

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.suffix.startswith(".") or len(self.suffix) < 2:
            raise ValueError(f"suffix must start with '.': {self.suffix!r}")
        if not self.binding.isidentifier():
            raise ValueError(f"binding must be an identifier: {self.binding!r}")
        if not self.placeholder:
            raise ValueError("placeholder must not be empty")

    @classmethod
    def from_args(
        cls,
        data: Optional[str | Path] = None,
        out: Optional[str | Path] = None,
        template: Optional[str | Path] = None,
        *,
        base: Optional[Path] = None,
        **overrides,
    ) -> "BuilderConfig":
        """
        Build a config from the three path overrides, resolving each
        against ``base`` (default: current working directory).
        """
        return cls(
            data_dir=resolve_path(data or DEFAULT_DATA_DIR, base),
            output_path=resolve_path(out or DEFAULT_OUTPUT_PATH, base),
            template_path=resolve_path(template or DEFAULT_TEMPLATE_PATH, base),
            **overrides,
        )
