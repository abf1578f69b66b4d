"""
pwcore Configuration Management
===============================

Centralized configuration for pwcheck using Python dataclasses and
TOML-based persistence.

A configuration file is optional. When present it is split into a
``[global]`` table (logging, output) and an ``[evaluator]`` table
(guess rate, breach-corpus endpoint)::

    [global]
    log_level = "DEBUG"
    log_file = "logs/pwcheck.log"

    [evaluator]
    breach_timeout = 3.0
    extra_common_passwords = ["hunter2", "changeme"]

References:
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
    - Have I Been Pwned, Pwned Passwords API v3.
      https://haveibeenpwned.com/API/v3#PwnedPasswords
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Section Configs ================================


@dataclass(frozen=False, slots=True)
class EvaluatorConfig:
    """Configuration for the password evaluation pipeline.

    The guess rate feeds the brute-force crack time estimate; the
    ``breach_*`` fields govern the k-anonymity range lookup.
    """

    guesses_per_second: float = 1e9
    breach_check: bool = True
    breach_api_url: str = "https://api.pwnedpasswords.com"
    breach_timeout: float = 5.0
    breach_padding: bool = True
    user_agent: str = "pwcheck/1.0 (password strength evaluator)"
    extra_common_passwords: list[str] = field(default_factory=list)


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Logging verbosity, log destination, and report output settings."""

    log_level: str = "WARNING"
    log_file: str | None = None
    log_json: bool = False
    output_dir: str = "output"
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class PwConfig:
    """Master configuration aggregating global and evaluator settings.

    Usage:
        >>> config = PwConfig.load()                  # from default path
        >>> config = PwConfig.load("custom.toml")     # from custom path
        >>> config.evaluator.guesses_per_second
        1000000000.0
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    evaluator: EvaluatorConfig = field(default_factory=EvaluatorConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> PwConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`PwConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            evaluator=cls._build_section(EvaluatorConfig, raw.get("evaluator", {})),
        )

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)
