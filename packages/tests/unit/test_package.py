"""Smoke tests for lightning_time package structure.

Test Techniques Used:
- Specification-based: Verify package imports and version metadata exist.
"""

import lightning_time


class TestPackageStructure:
    """Verify the package is importable and versioned."""

    def test_package_importable(self) -> None:
        assert lightning_time is not None

    def test_version_is_string(self) -> None:
        assert isinstance(lightning_time.__version__, str)
        assert len(lightning_time.__version__) > 0
