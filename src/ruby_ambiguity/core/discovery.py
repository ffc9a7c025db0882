import fnmatch
import logging
import os
import subprocess
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_FILE_TYPES: dict[str, tuple[str, ...]] = {
    "ruby": ("*.rb", "*.rake", "*.gemspec", "Gemfile", "Rakefile", "config.ru"),
}


@dataclass(frozen=True)
class FileTypeMatcher:
    name: str
    globs: tuple[str, ...]

    def matches(self, path: Path) -> bool:
        return any(fnmatch.fnmatchcase(path.name, pattern) for pattern in self.globs)


def build_type_matcher(file_type: str) -> FileTypeMatcher:
    normalized = file_type.strip().lower()
    if normalized not in _FILE_TYPES:
        raise ValueError(f"Unsupported file type '{file_type}'. Supported: {sorted(_FILE_TYPES)}")
    return FileTypeMatcher(name=normalized, globs=_FILE_TYPES[normalized])


def _is_hidden(rel_path: Path) -> bool:
    return any(part.startswith(".") for part in rel_path.parts)


def get_git_repo_root(start_dir: Path) -> Path | None:
    try:
        result = subprocess.run(
            ["git", "-C", str(start_dir), "rev-parse", "--show-toplevel"],
            check=False,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        return None
    if result.returncode != 0:
        return None
    root = result.stdout.strip()
    if not root:
        return None
    return Path(root)


def _git_visible_files(root: Path) -> list[Path] | None:
    """Tracked and untracked files under *root* that git does not ignore."""
    if get_git_repo_root(root) is None:
        return None
    result = subprocess.run(
        ["git", "-C", str(root), "ls-files", "--cached", "--others", "--exclude-standard", "-z"],
        check=False,
        capture_output=True,
    )
    if result.returncode != 0:
        return None
    entries = result.stdout.decode("utf-8", errors="surrogateescape").split("\0")
    return sorted({Path(entry) for entry in entries if entry})


def _walk_files(root: Path) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
        base = Path(dirpath)
        for filename in sorted(filenames):
            yield (base / filename).relative_to(root)


def iter_source_files(root: str | Path, matcher: FileTypeMatcher) -> Iterator[Path]:
    """Yield files under *root* matching *matcher*, relative to *root*.

    Hidden entries and directories are skipped, as are paths ignored by git
    when *root* lies inside a work tree.
    """
    root_path = Path(root)
    candidates: list[Path] | Iterator[Path] | None = _git_visible_files(root_path)
    if candidates is None:
        candidates = _walk_files(root_path)
    else:
        logger.debug("Listing files of git work tree at %s", root_path)

    for rel_path in candidates:
        if _is_hidden(rel_path) or not matcher.matches(rel_path):
            continue
        if not (root_path / rel_path).is_file():
            continue
        yield rel_path
