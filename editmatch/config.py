from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Optional, Sequence

import tomllib

from .utils import ensure_file_exists, resolve_path


@dataclass(frozen=True)
class BenchmarkCase:
    """One population of random strings to time comparisons over."""

    min_len: int
    max_len: int
    count: int
    alphabet_size: int = 24

    def __post_init__(self) -> None:
        if self.min_len < 0 or self.max_len < self.min_len:
            raise ValueError(
                f"Invalid length range {self.min_len}-{self.max_len} for benchmark case"
            )
        if self.count < 2:
            raise ValueError("Benchmark cases need at least two strings")
        if self.alphabet_size < 1:
            raise ValueError("alphabet_size must be positive")

    @property
    def label(self) -> str:
        if self.min_len == self.max_len:
            return str(self.max_len)
        return f"{self.min_len}-{self.max_len}"

    @classmethod
    def coerce(cls, value: Any) -> "BenchmarkCase":
        if isinstance(value, BenchmarkCase):
            return value
        if isinstance(value, Mapping):
            return cls(**dict(value))
        if isinstance(value, Sequence) and not isinstance(value, str):
            return cls(*[int(v) for v in value])
        raise TypeError(f"Cannot interpret {value!r} as a benchmark case")


def _default_cases() -> list[BenchmarkCase]:
    return [
        BenchmarkCase(5, 5, 400, 24),
        BenchmarkCase(15, 15, 200, 24),
        BenchmarkCase(25, 25, 200, 24),
        BenchmarkCase(100, 100, 50, 20),
    ]


@dataclass
class BenchmarkConfig:
    """Options for the timing harness."""

    metrics: list[str] = field(default_factory=lambda: ["levenshtein", "damerau_osa"])
    cases: list[BenchmarkCase] = field(default_factory=_default_cases)
    repetitions: int = 3
    seed: int = 1
    include_static: bool = True
    include_similarity: bool = True
    compare_rapidfuzz: bool = False
    results_csv: Optional[str] = None

    def __post_init__(self) -> None:
        self.metrics = [str(m) for m in self.metrics]
        self.cases = [BenchmarkCase.coerce(case) for case in self.cases]
        if self.repetitions < 1:
            raise ValueError("repetitions must be at least 1")

    def to_kwargs(self) -> dict[str, Any]:
        return asdict(self)

    def resolve_results_path(self, base_path: Optional[Path] = None) -> Optional[Path]:
        if not self.results_csv:
            return None
        return resolve_path(base_path, self.results_csv)


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class AppConfig:
    """Full application configuration tree."""

    seed: int = 37
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _coerce_section(section: Mapping[str, Any] | None, cls: type[Any]) -> Any:
    if section is None:
        return cls()
    if not isinstance(section, Mapping):
        raise TypeError(f"Expected a mapping for {cls.__name__}, got {type(section)!r}")
    kwargs: MutableMapping[str, Any] = dict(section)
    return cls(**kwargs)


def load_config(path: str | Path) -> AppConfig:
    """Load configuration from a TOML file."""

    config_path = ensure_file_exists(Path(path), "config file")

    with config_path.open("rb") as fh:
        raw: Mapping[str, Any] = tomllib.load(fh)

    global_section = raw.get("global")
    if global_section is None:
        global_section = {}
    elif not isinstance(global_section, Mapping):
        raise TypeError("Config 'global' section must be a mapping if provided.")

    seed_default = AppConfig.__dataclass_fields__["seed"].default
    seed_raw = global_section.get("seed", raw.get("seed", seed_default))
    try:
        seed_value = int(seed_raw)
    except (TypeError, ValueError) as exc:
        raise TypeError("Config 'seed' must be an integer.") from exc

    benchmark_section = raw.get("benchmark")
    benchmark_cfg = _coerce_section(benchmark_section, BenchmarkConfig)
    if not isinstance(benchmark_section, Mapping) or "seed" not in benchmark_section:
        benchmark_cfg.seed = seed_value

    return AppConfig(
        seed=seed_value,
        benchmark=benchmark_cfg,
        logging=_coerce_section(raw.get("logging"), LoggingConfig),
    )


def coerce_benchmark_config(
    config: BenchmarkConfig | Mapping[str, Any] | None,
) -> BenchmarkConfig:
    if config is None:
        return BenchmarkConfig()
    if isinstance(config, BenchmarkConfig):
        return config
    return _coerce_section(config, BenchmarkConfig)


__all__ = [
    "AppConfig",
    "BenchmarkCase",
    "BenchmarkConfig",
    "LoggingConfig",
    "coerce_benchmark_config",
    "load_config",
]
