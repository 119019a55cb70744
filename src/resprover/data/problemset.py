"""Collections of problem files for the prover driver."""

import glob
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from resprover.core.logic import Problem
from resprover.fileformats import FileFormat, format_for_path, get_format_handler


class ProblemSet:
    """Problem files from explicit paths and glob patterns, parsed lazily."""

    def __init__(self,
                 files: Iterable[Union[str, Path]] = (),
                 patterns: Iterable[str] = (),
                 base_path: Union[str, Path] = '.',
                 file_format: Optional[str] = None):
        self.base_path = Path(base_path)
        self.file_handler: Optional[FileFormat] = (
            get_format_handler(file_format) if file_format else None)
        self.problem_files = self._collect_problem_files(files, patterns)

        # Cache for loaded problems
        self._problem_cache: Dict[int, Problem] = {}

    @classmethod
    def from_list_file(cls, list_file: Union[str, Path], **kwargs) -> 'ProblemSet':
        """Read problem paths from a file, one per line."""
        with open(list_file) as f:
            return cls.from_lines(f, **kwargs)

    @classmethod
    def from_lines(cls, lines: Iterable[str], **kwargs) -> 'ProblemSet':
        files = [line.strip() for line in lines]
        return cls(files=[f for f in files if f and not f.startswith('#')], **kwargs)

    def _collect_problem_files(self, files, patterns) -> List[Path]:
        """Collect all problem files, explicit ones first."""
        collected = []

        # Add explicitly listed files
        for file_path in files:
            collected.append(self.base_path / file_path)

        # Add files matching patterns
        for pattern in patterns:
            pattern_path = str(self.base_path / pattern)
            collected.extend(Path(f) for f in sorted(glob.glob(pattern_path, recursive=True)))

        # Remove duplicates while preserving order
        return list(dict.fromkeys(collected))

    def __len__(self) -> int:
        return len(self.problem_files)

    def __iter__(self) -> Iterator[Tuple[Path, Problem]]:
        for idx, path in enumerate(self.problem_files):
            yield path, self.get_problem(idx)

    def get_problem(self, idx: int) -> Problem:
        """Get a problem by index.

        Raises:
            FileNotFoundError: If the file is missing
            ValueError: If the file cannot be parsed
        """
        if idx not in self._problem_cache:
            problem_file = self.problem_files[idx]
            handler = self.file_handler or format_for_path(problem_file)
            self._problem_cache[idx] = handler.parse_file(problem_file)
        return self._problem_cache[idx]

    def clear_cache(self):
        """Clear the problem cache."""
        self._problem_cache.clear()
