from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class InitError(Enum):
    NoCommand = "No command"
    FailedUFO = "Failed to write out UFO font"
    FailedGlif = "Failed to write .glif file"

    @property
    def desc(self) -> str:
        return self.value

    def __str__(self):
        return f"{self.name} ({self.desc})"


class InitResult:
    """Outcome of one MFEKinit run, shared by the glif and ufo commands."""

    exit_code = 0


@dataclass
class GlifOk(InitResult):
    path: str


@dataclass
class GlifStdoutOk(InitResult):
    pass


@dataclass
class UfoOk(InitResult):
    path: Path


@dataclass
class Error(InitResult):
    kind: InitError
    reason: Optional[str] = None

    @property
    def exit_code(self) -> int:
        # usage errors share argparse's exit status
        return 2 if self.kind is InitError.NoCommand else 1

    @property
    def message(self) -> str:
        if self.reason:
            return f'{self.kind}: "{self.reason}"'
        return str(self.kind)
