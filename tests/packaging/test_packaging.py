"""Packaging correctness verification for keycase.

Tests validate that:
- Base install has no ImportError from the optional HTTP transport
- py.typed marker is present in the wheel
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import subprocess
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstallNoImportError:
    """Verify base install does not raise ImportError from optional extras."""

    def test_import_keycase(self) -> None:
        """Top-level import succeeds."""
        import keycase

        assert hasattr(keycase, "convert")
        assert hasattr(keycase, "handle_job")
        assert hasattr(keycase, "ConversionWorker")
        assert keycase.__version__ == "0.1.0"

    def test_every_public_name_resolves(self) -> None:
        import keycase

        for name in keycase.__all__:
            assert getattr(keycase, name) is not None, name

    def test_convert_basic(self) -> None:
        """convert() works without any extra installed."""
        from keycase import convert

        assert convert("a_b").to_dict() == {"type": "success", "result": "aB"}

    def test_integrations_import(self) -> None:
        """integrations package imports whether or not FastAPI is installed."""
        import keycase.integrations

        assert isinstance(keycase.integrations.__all__, list)


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        dist_dir = PROJECT_ROOT / "dist"
        # Use poetry build since that's the project's build system
        try:
            result = subprocess.run(
                ["poetry", "build", "-f", "wheel"],
                cwd=str(PROJECT_ROOT),
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            pytest.skip("poetry is not installed")
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("keycase-*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path) -> None:
        """py.typed marker must be included in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            assert any(n.endswith("keycase/py.typed") for n in names), names

    def test_no_pycache_in_wheel(self, wheel_path: Path) -> None:
        with zipfile.ZipFile(wheel_path) as zf:
            pycache_files = [n for n in zf.namelist() if "__pycache__" in n]
            assert not pycache_files, f"__pycache__ found in wheel: {pycache_files}"

    def test_all_source_modules_in_wheel(self, wheel_path: Path) -> None:
        expected_modules = [
            "keycase/__init__.py",
            "keycase/api.py",
            "keycase/csv_headers.py",
            "keycase/dispatcher.py",
            "keycase/jobs.py",
            "keycase/options.py",
            "keycase/paths.py",
            "keycase/validation.py",
            "keycase/worker.py",
            "keycase/text/__init__.py",
            "keycase/text/pipeline.py",
            "keycase/text/tokenizer.py",
            "keycase/text/words.py",
            "keycase/tree/__init__.py",
            "keycase/tree/nodes.py",
            "keycase/tree/transformer.py",
            "keycase/integrations/__init__.py",
            "keycase/integrations/_http.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), f"Module {module} not found in wheel"

    def test_metadata_in_wheel(self, wheel_path: Path) -> None:
        with zipfile.ZipFile(wheel_path) as zf:
            metadata_files = [n for n in zf.namelist() if n.endswith("METADATA")]
            assert metadata_files, "No METADATA found in wheel"
            metadata = zf.read(metadata_files[0]).decode()
            assert "Name: keycase" in metadata
            assert "0.1.0" in metadata
