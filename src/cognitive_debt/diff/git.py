"""Git state exporter: materialize a ref as a plain directory tree.

``git archive`` writes the ref's full tree as a tar stream into a spooled
archive file, which is then extracted into a fresh temporary directory. The
directory is removed when the ``exported_ref`` context exits, whatever the
outcome of the work done inside it. Removal failures are logged, never
raised.
"""

from __future__ import annotations

import shutil
import subprocess
import tarfile
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional, Sequence

from ..exceptions import ExternalProcessError, InvalidPathError
from ..logging_config import get_logger

logger = get_logger(__name__)

TEMP_PREFIX = "cognitive-debt-diff-"
DEFAULT_EXPORT_TIMEOUT = 120
DEFAULT_QUERY_TIMEOUT = 30


class GitExporter:
    """Validates and exports refs of the repository at ``repo_path``."""

    def __init__(
        self,
        repo_path: Path,
        export_timeout: int = DEFAULT_EXPORT_TIMEOUT,
        query_timeout: int = DEFAULT_QUERY_TIMEOUT,
    ):
        self.repo_path = Path(repo_path).resolve()
        self.export_timeout = export_timeout
        self.query_timeout = query_timeout

    def ensure_repository(self) -> None:
        """Raise InvalidPathError unless ``repo_path`` is inside a git work tree."""
        result = self._run(["git", "rev-parse", "--is-inside-work-tree"], self.query_timeout)
        if result.returncode != 0 or result.stdout.strip() != b"true":
            raise InvalidPathError(self.repo_path, "not a git repository")

    def is_valid_ref(self, ref: str) -> bool:
        """Return True if ``ref`` resolves to a commit."""
        if not ref or ref.startswith("-"):
            return False
        result = self._run(
            ["git", "rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}"],
            self.query_timeout,
        )
        return result.returncode == 0

    def export_ref(self, ref: str) -> Path:
        """Export ``ref``'s tree into a new temporary directory.

        The caller owns the returned directory; prefer ``exported_ref``.

        Raises:
            ExternalProcessError: If git archive or extraction fails
        """
        temp_dir = Path(tempfile.mkdtemp(prefix=TEMP_PREFIX))
        cmd = ["git", "archive", "--format=tar", ref]
        try:
            with tempfile.TemporaryFile() as archive_file:
                result = self._run(cmd, self.export_timeout, stdout=archive_file)
                if result.returncode != 0:
                    raise ExternalProcessError(cmd, _decode(result.stderr) or f"exit code {result.returncode}")
                archive_file.seek(0)
                try:
                    with tarfile.open(fileobj=archive_file, mode="r:") as archive:
                        archive.extractall(temp_dir, filter=_safe_member)
                except tarfile.TarError as e:
                    raise ExternalProcessError(cmd, f"cannot extract archive: {e}")
        except BaseException:
            self.cleanup(temp_dir)
            raise

        logger.info("Exported %s to %s", ref, temp_dir)
        return temp_dir

    @contextmanager
    def exported_ref(self, ref: str) -> Iterator[Path]:
        """Context manager yielding an exported ref directory, removed on exit."""
        path = self.export_ref(ref)
        try:
            yield path
        finally:
            self.cleanup(path)

    def cleanup(self, path: Optional[Path]) -> None:
        """Remove a temporary directory; failures are logged as warnings."""
        if path is None or not Path(path).exists():
            return
        try:
            shutil.rmtree(path)
        except OSError as e:
            logger.warning("Failed to clean up temp dir %s: %s", path, e)

    def _run(
        self,
        cmd: Sequence[str],
        timeout: int,
        stdout=subprocess.PIPE,
    ) -> subprocess.CompletedProcess:
        try:
            return subprocess.run(
                list(cmd),
                cwd=self.repo_path,
                stdout=stdout,
                stderr=subprocess.PIPE,
                timeout=timeout,
                check=False,
            )
        except FileNotFoundError:
            raise ExternalProcessError(cmd, "git executable not found")
        except subprocess.TimeoutExpired:
            raise ExternalProcessError(cmd, f"timed out after {timeout}s")


def _safe_member(member: tarfile.TarInfo, dest_path: str) -> Optional[tarfile.TarInfo]:
    """Extraction filter: skip entries that would escape the destination."""
    try:
        return tarfile.data_filter(member, dest_path)
    except tarfile.FilterError as e:
        logger.debug("Skipping archive entry %s: %s", member.name, e)
        return None


def _decode(raw: Optional[bytes]) -> str:
    return raw.decode("utf-8", errors="replace").strip() if raw else ""
