"""Vendor preparation: stage local framework source or fall back to the release.

Every build/run/deploy command calls prepare_vendor() before spawning any
process. The vendor directory is always removed first, so downstream builds
never observe a mix of staged and released framework code.

Staging is all-or-nothing: sources are verified up front, copied into a
temporary sibling directory, and renamed into place only once complete.
Leftover staging directories from a killed run are removed with the vendor
directory, and each source root keeps its path relative to the framework root.
"""

import logging
import os
import shutil
import tempfile
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from ffecho.core.errors import MissingSourceError
from ffecho.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)

DEFAULT_VENDOR_DIR = "vendor"


@dataclass(frozen=True)
class VendorSources:
    """Location of the local framework source tree.

    Attributes:
        framework_root: Root of the framework checkout
        entry_point_dir: Executable entry point directory, relative to root
        library_dir: Library directory, relative to root
        manifest_file: Package manifest file, relative to root
        package_name: Directory name used under the vendor directory
    """

    framework_root: Path
    entry_point_dir: str = "bin"
    library_dir: str = "lib"
    manifest_file: str = "functions_framework.gemspec"
    package_name: str = "functions_framework"

    @property
    def roots(self) -> Iterator[Path]:
        """The three source roots, in copy order."""
        yield self.framework_root / self.entry_point_dir
        yield self.framework_root / self.library_dir
        yield self.framework_root / self.manifest_file


def vendored_package_dir(
    working_dir: Path,
    sources: VendorSources,
    vendor_dir_name: str = DEFAULT_VENDOR_DIR,
) -> Path:
    """Directory the staged framework copy lives in."""
    return working_dir / vendor_dir_name / sources.package_name


def _staging_prefix(vendor_dir_name: str) -> str:
    return f".{vendor_dir_name}-"


def _remove_path(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
    logger.debug("Removed %s", path)


def clean_vendor(working_dir: Path, vendor_dir_name: str = DEFAULT_VENDOR_DIR) -> bool:
    """Remove the vendor directory and any staging leftovers of an interrupted run.

    Returns:
        True if something was removed, False if it was already absent
    """
    leftovers = sorted(working_dir.glob(f"{_staging_prefix(vendor_dir_name)}*"))
    vendor_dir = working_dir / vendor_dir_name
    if vendor_dir.exists() or vendor_dir.is_symlink():
        leftovers.append(vendor_dir)
    for path in leftovers:
        _remove_path(path)
    return bool(leftovers)


def _find_missing(sources: VendorSources) -> list[Path]:
    missing: list[Path] = []
    for root in sources.roots:
        if not root.exists() or not os.access(root, os.R_OK):
            missing.append(root)
    return missing


def _copy_root(source: Path, destination: Path) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    if source.is_dir():
        shutil.copytree(source, destination, symlinks=True)
    else:
        shutil.copy2(source, destination)


def prepare_vendor(
    stage: bool,
    working_dir: Path,
    sources: VendorSources,
    feedback: UserFeedback,
    vendor_dir_name: str = DEFAULT_VENDOR_DIR,
) -> None:
    """Stage the local framework source into the vendor directory, or un-stage it.

    Args:
        stage: True to copy local source, False to use the released package
        working_dir: Directory holding the vendor directory (the app directory)
        sources: Where the local framework source lives
        feedback: Receives the status line naming the selected mode
        vendor_dir_name: Name of the vendor directory under working_dir

    Raises:
        MissingSourceError: If stage is True and any source root is missing.
            No vendor directory is left behind in that case.
        OSError: If copying fails; the partial copy is removed first
    """
    clean_vendor(working_dir, vendor_dir_name)

    if not stage:
        logger.debug("Vendoring disabled, using released package")
        feedback.info("Un-vendoring the framework and using the released package")
        return

    missing = _find_missing(sources)
    if missing:
        raise MissingSourceError(missing)

    target = vendored_package_dir(working_dir, sources, vendor_dir_name)
    feedback.info(
        f"Vendoring the current framework source into {vendor_dir_name}/{sources.package_name}"
    )

    staging_root = Path(
        tempfile.mkdtemp(prefix=_staging_prefix(vendor_dir_name), dir=working_dir)
    )
    try:
        # mkdtemp creates 0o700; the vendor dir is read by docker and gcloud builds
        staging_root.chmod(0o755)
        staged_package = staging_root / sources.package_name
        staged_package.mkdir()
        for root in sources.roots:
            logger.debug("Copying %s", root)
            _copy_root(root, staged_package / root.relative_to(sources.framework_root))
        staging_root.rename(working_dir / vendor_dir_name)
    except BaseException:
        shutil.rmtree(staging_root, ignore_errors=True)
        raise

    logger.debug("Staged framework source at %s", target)
