"""JSON metrics of prover runs.

One file per run holds the search configuration, every proof attempt, every
value network update and a final summary. The file is rewritten after each
event so an interrupted run still leaves usable metrics behind.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional


def _now() -> str:
    return datetime.now().isoformat()


class JSONLogger:
    """Writes ``{log_dir}/{run_name}.json`` and lists the run in ``index.json``."""

    def __init__(self, log_dir: Path, run_name: str):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.run_name = run_name
        self.log_file = self.log_dir / f"{run_name}.json"
        self.index_file = self.log_dir / "index.json"

        self.metrics: Dict[str, Any] = {
            "name": run_name,
            "start_time": _now(),
            "end_time": None,
            "total_time_seconds": None,
            "config": {},
            "attempts": [],
            "trainings": [],
            "summary": {},
        }
        self._write(self.log_file, self.metrics)
        self._register_run()

    def log_config(self, config: Dict[str, Any]):
        self.metrics["config"] = config
        self._flush()

    def log_attempt(self, problem: str, attempt: int, verdict: str, steps: int,
                    new_clauses: int, seconds: float,
                    temperature: Optional[float] = None):
        """Record one proof attempt.

        Args:
            problem: Problem file
            attempt: Attempt number for this problem, starting at 0
            verdict: ``"proved"`` or ``"rejected"``
            steps: Given clause steps taken
            new_clauses: Resolvents added to the unprocessed set
            seconds: Wall time of the attempt
            temperature: Lambda of the learned selector, if used
        """
        self.metrics["attempts"].append({
            "problem": problem,
            "attempt": attempt,
            "verdict": verdict,
            "steps": steps,
            "new_clauses": new_clauses,
            "seconds": seconds,
            "temperature": temperature,
        })
        self._flush()

    def log_training(self, update: int, loss: float):
        self.metrics["trainings"].append({"update": update, "loss": loss, "time": _now()})
        self._flush()

    def log_final(self, summary: Dict[str, Any], total_time: float):
        self.metrics.update(end_time=_now(), total_time_seconds=total_time, summary=summary)
        self._flush()

    def _flush(self):
        self._write(self.log_file, self.metrics)

    def _register_run(self):
        runs = []
        if self.index_file.exists():
            with open(self.index_file) as f:
                runs = json.load(f).get("runs", [])
        if self.run_name not in runs:
            self._write(self.index_file, {"runs": sorted(runs + [self.run_name])})

    @staticmethod
    def _write(path: Path, data: Dict[str, Any]):
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
