"""Run single-use scripts through an external interpreter."""

from __future__ import annotations

import asyncio
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Mapping
from uuid import uuid4

from abpdev.errors import ProcessSpawnError
from abpdev.utils.paths import ensure_directories, remove_file_quietly

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScriptRunResult:
    """Exit status and captured output of one interpreter run."""

    script_path: Path
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@contextmanager
def transient_script(
    directory: Path,
    content: str,
    *,
    suffix: str = ".ps1",
    logger: logging.Logger | None = None,
) -> Iterator[Path]:
    """Write ``content`` to a uniquely named file and delete it when the block exits.

    Deletion failures are logged and never raised, so they cannot replace an
    exception coming out of the block.
    """

    effective_logger = logger or LOGGER
    ensure_directories([directory])
    script_path = directory / f"{uuid4().hex}{suffix}"
    try:
        script_path.write_text(content, encoding="utf-8")
        effective_logger.debug("scripts.written path=%s", script_path)
        yield script_path
    finally:
        error = remove_file_quietly(script_path)
        if error is not None:
            effective_logger.warning("scripts.delete_failed path=%s error=%s", script_path, error)


class TransientScriptRunner:
    """Write a script, run it with the configured interpreter, always delete it."""

    def __init__(
        self,
        directory: Path,
        tools: Mapping[str, str],
        interpreter_key: str = "powershell",
        *,
        suffix: str = ".ps1",
        logger: logging.Logger | None = None,
    ) -> None:
        self.directory = directory
        self.tools = dict(tools)
        self.interpreter_key = interpreter_key
        self.suffix = suffix
        self.logger = logger or LOGGER

    def resolve_interpreter(self) -> str:
        interpreter = self.tools.get(self.interpreter_key)
        if not interpreter:
            raise ProcessSpawnError(f"No interpreter configured for tool '{self.interpreter_key}'.")
        return interpreter

    async def run(self, content: str) -> ScriptRunResult:
        with transient_script(self.directory, content, suffix=self.suffix, logger=self.logger) as script_path:
            interpreter = self.resolve_interpreter()
            try:
                process = await asyncio.create_subprocess_exec(
                    interpreter,
                    str(script_path),
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                )
            except OSError as exc:
                self.logger.error("scripts.spawn_failed interpreter=%s error=%s", interpreter, exc)
                raise ProcessSpawnError(f"Could not start interpreter '{interpreter}': {exc}") from exc

            stdout_b, stderr_b = await process.communicate()

        stdout = stdout_b.decode("utf-8", errors="replace") if stdout_b is not None else ""
        stderr = stderr_b.decode("utf-8", errors="replace") if stderr_b is not None else ""
        result = ScriptRunResult(
            script_path=script_path,
            returncode=process.returncode if process.returncode is not None else -1,
            stdout=stdout,
            stderr=stderr,
        )
        if result.ok:
            self.logger.info("scripts.finished interpreter=%s returncode=0", interpreter)
        else:
            self.logger.warning(
                "scripts.failed interpreter=%s returncode=%s stderr=%s",
                interpreter,
                result.returncode,
                stderr.strip(),
            )
        return result
