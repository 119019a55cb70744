"""Base class for problem file formats."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from resprover.core.logic import Problem


class FileFormat(ABC):
    """Reads and writes clause problems in one textual format."""

    @abstractmethod
    def parse_string(self, content: str, **kwargs) -> Problem:
        """Parse problem text.

        Raises:
            ValueError: If the text is not valid in this format
        """
        pass

    @abstractmethod
    def format_problem(self, problem: Problem, **kwargs) -> str:
        pass

    def parse_file(self, file_path: Path, **kwargs) -> Problem:
        """Parse a problem file, naming the problem after the file stem.

        Raises:
            FileNotFoundError: If the file is missing
            ValueError: If the file is not valid in this format
        """
        file_path = Path(file_path)
        kwargs.setdefault('name', file_path.stem)
        return self.parse_string(file_path.read_text(), **kwargs)

    def write_file(self, problem: Problem, file_path: Path, **kwargs):
        Path(file_path).write_text(self.format_problem(problem, **kwargs))

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def extensions(self) -> List[str]:
        """File suffixes, including the dot."""
        pass
