# application/dto/batch_dto.py
# Data Transfer Objects for per-file and batch trim results.

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class FileResultDTO:
    """Result for a single file."""
    input_path: str
    output_path: str
    status: str = "done"         # done | error
    error: Optional[str] = None
    samples_in: int = 0
    samples_out: int = 0

    @property
    def ok(self) -> bool:
        return self.status == "done"


@dataclass
class BatchResultDTO:
    """Aggregate result for one directory run."""
    input_dir: str = ""
    output_dir: str = ""
    results: List[FileResultDTO] = field(default_factory=list)
    failed_paths: List[str] = field(default_factory=list)
    total: int = 0
    processed: int = 0

    def add(self, result: FileResultDTO) -> None:
        self.results.append(result)
        if result.ok:
            self.processed += 1
        else:
            self.failed_paths.append(result.input_path)
