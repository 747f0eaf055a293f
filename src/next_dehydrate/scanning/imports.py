"""Local import extraction and resolution.

Only local specifiers are considered: relative paths (./, ../) and
configured root aliases (@/ by default). Package imports never resolve and
are never inspected.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from .patterns import IMPORT_PATTERNS, RELATIVE_PREFIXES, SOURCE_EXTENSIONS


def extract_import_specifiers(content: str) -> list[str]:
    """Return every module specifier found by the import pattern scan, in source order."""
    found: list[tuple[int, str]] = []
    for pattern in IMPORT_PATTERNS:
        found.extend((m.start(), m.group(1)) for m in pattern.finditer(content))
    found.sort()

    specifiers: list[str] = []
    seen: set[str] = set()
    for _, spec in found:
        spec = spec.strip()
        if spec and spec not in seen:
            seen.add(spec)
            specifiers.append(spec)
    return specifiers


class ImportResolver:
    """Resolves local import specifiers to files on disk.

    Args:
        source_root: Directory that alias specifiers resolve against
        alias_prefixes: Specifier prefixes treated as root aliases
        extensions: Recognised source extensions, in priority order
    """

    def __init__(
        self,
        source_root: Path,
        alias_prefixes: Iterable[str] = ("@/",),
        extensions: Iterable[str] = SOURCE_EXTENSIONS,
    ):
        self.source_root = Path(source_root)
        self.alias_prefixes = tuple(alias_prefixes)
        self.extensions = tuple(extensions)

    def is_local(self, specifier: str) -> bool:
        return specifier.startswith(RELATIVE_PREFIXES) or specifier.startswith(
            self.alias_prefixes
        )

    def local_imports(self, content: str) -> list[str]:
        """Extract the local import specifiers of a module."""
        return [spec for spec in extract_import_specifiers(content) if self.is_local(spec)]

    def candidates(self, base_dir: Path, specifier: str) -> list[Path]:
        """Candidate files for *specifier*, in resolution order."""
        target = self._target(base_dir, specifier)

        paths: list[Path] = []
        if target.suffix in self.extensions:
            paths.append(target)
        paths.extend(Path(f"{target}{ext}") for ext in self.extensions)
        paths.extend(target / f"index{ext}" for ext in self.extensions)
        return paths

    def resolve(self, base_dir: Path, specifier: str) -> Optional[Path]:
        """Resolve *specifier* imported from a module in *base_dir*.

        Returns the absolute path of the first existing candidate, or None
        when nothing matches (e.g. a missing file or a package import).
        """
        if not self.is_local(specifier):
            return None
        for candidate in self.candidates(base_dir, specifier):
            if candidate.is_file():
                return candidate.resolve()
        return None

    def _target(self, base_dir: Path, specifier: str) -> Path:
        for prefix in self.alias_prefixes:
            if specifier.startswith(prefix):
                return self.source_root / specifier[len(prefix):]
        return Path(base_dir) / specifier
