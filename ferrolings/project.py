"""Generating rust-project.json so rust-analyzer understands the exercises."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path

PROJECT_FILE = "./rust-project.json"


@dataclass
class Crate:
    """One exercise file treated as a crate by rust-analyzer."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_json(self) -> str:
        """Serialise the project as compact JSON."""
        return json.dumps(asdict(self), separators=(",", ":"), ensure_ascii=False)

    def write_to_disk(self) -> None:
        """Write rust-project.json into the current directory."""
        Path(PROJECT_FILE).write_bytes(self.to_json().encode("utf-8"))

    def path_to_json(self, path: str) -> None:
        """Add a crate for ``path`` when the text after its first dot is ``rs``."""
        _, dot, extension = path.partition(".")
        if dot and extension == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root: str | os.PathLike = ".") -> None:
        """Add a crate for every .rs file found under ``root``/exercises."""
        for path in sorted(Path(root, "exercises").glob("**/*")):
            self.path_to_json(str(path))

    def get_sysroot_src(self) -> None:
        """Find the standard library sources, from RUST_SRC_PATH or from rustc."""
        from_env = os.environ.get("RUST_SRC_PATH")
        if from_env is not None:
            self.sysroot_src = from_env
            return

        result = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True, check=False)
        output = result.stdout.decode("utf-8", errors="replace")
        words = output.split()
        toolchain = words[0] if words else output

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(Path(toolchain, "lib", "rustlib", "src", "rust", "library"))