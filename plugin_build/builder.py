"""
Plugin build orchestration.

Resets the output directory, copies the plugin assets into it, then hands the
native binary over to ``cargo install`` with a per-platform install root.
"""

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import List, Union

from tqdm import tqdm

from .platforms import current_platform
from .process import terminate_process_tree

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class Builder:
    """Builds a plugin package into an output directory."""

    def __init__(self, out_dir: PathLike, target: str,
                 assets_dir: PathLike = "assets", crate_dir: PathLike = ".",
                 cargo: str = "cargo", show_progress: bool = True):
        self.out_dir = Path(out_dir)
        self.target = target
        self.assets_dir = Path(assets_dir)
        self.crate_dir = Path(crate_dir)
        self.cargo = cargo
        self.show_progress = show_progress

    @property
    def install_root(self) -> Path:
        """Directory cargo installs into, namespaced by operating system."""
        return self.out_dir / current_platform()

    def reset_output_dir(self) -> None:
        """Remove the output directory. A missing directory is not an error."""
        logger.info("Removing output directory: %s", self.out_dir)
        try:
            if self.out_dir.is_dir() and not self.out_dir.is_symlink():
                shutil.rmtree(self.out_dir)
            else:
                self.out_dir.unlink()
        except FileNotFoundError:
            logger.debug("Output directory does not exist: %s", self.out_dir)

    def copy_assets(self) -> bool:
        """Copy the contents of the assets directory into the output directory.

        Symlinks are copied as symlinks, including ones that point nowhere.
        """
        if not self.assets_dir.is_dir():
            logger.error("Assets directory not found: %s", self.assets_dir)
            return False

        logger.info("Copying assets from %s to %s", self.assets_dir, self.out_dir)

        # copytree only routes regular files through copy_function
        total = sum(
            1
            for root, _, names in os.walk(self.assets_dir)
            for name in names
            if not os.path.islink(os.path.join(root, name))
        )

        with tqdm(total=total, desc="Copying assets", unit="file",
                  disable=not self.show_progress) as progress:
            def copy_file(src, dst):
                shutil.copy2(src, dst)
                logger.debug("Copied %s", dst)
                progress.update()
                return dst

            shutil.copytree(self.assets_dir, self.out_dir, symlinks=True,
                            copy_function=copy_file, dirs_exist_ok=True)

        logger.info("Copied %d asset file(s)", total)
        return True

    def install_command(self) -> List[str]:
        """Return the cargo command that builds and installs the binary."""
        return [
            self.cargo, "install",
            "--path", str(self.crate_dir),
            "--target", self.target,
            "--root", str(self.install_root),
        ]

    def run_command(self, cmd: List[str]) -> bool:
        """Run a command, wait for it and return success status."""
        logger.info("Running: %s", " ".join(cmd))

        try:
            process = subprocess.Popen(cmd)
        except FileNotFoundError:
            logger.error("Command not found: %s", cmd[0])
            return False

        try:
            returncode = process.wait()
        except KeyboardInterrupt:
            logger.warning("Interrupted, stopping %s", cmd[0])
            terminate_process_tree(process.pid)
            raise

        if returncode != 0:
            logger.error("Command failed with exit code %d: %s",
                         returncode, " ".join(cmd))
            return False
        return True

    def install_binary(self) -> bool:
        """Build and install the native binary with cargo."""
        logger.info("Installing binary for %s into %s",
                    self.target, self.install_root)
        if not self.run_command(self.install_command()):
            logger.error("Failed to install binary")
            return False

        logger.info("Binary installed successfully")
        return True

    def build(self) -> bool:
        """Reset the output directory, copy the assets and install the binary."""
        self.reset_output_dir()

        if not self.copy_assets():
            return False

        if not self.install_binary():
            return False

        logger.info("Plugin built successfully in %s", self.out_dir)
        return True
