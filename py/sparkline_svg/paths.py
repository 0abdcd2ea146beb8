from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sparkline_svg.options import DEFAULT_HOME


@dataclass(frozen=True)
class RuntimePaths:
    root: Path = Path(DEFAULT_HOME)

    @property
    def artifacts_dir(self) -> Path:
        return self.root / "artifacts"

    @property
    def logs_dir(self) -> Path:
        return self.root / "logs"

    @property
    def structured_log_path(self) -> Path:
        return self.logs_dir / "structured.log"

    def artifact_path(self, name: str) -> Path:
        return self.artifacts_dir / name

    def ensure(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        self.artifacts_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)
