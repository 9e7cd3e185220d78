"""Test module imports and package functionality."""

from __future__ import annotations

from types import ModuleType


class TestPackageImports:
    """Test that every package can be imported."""

    def test_import_main_package(self) -> None:
        import chug

        assert isinstance(chug, ModuleType)

    def test_import_subpackages(self) -> None:
        import chug.app
        import chug.config
        import chug.config.loader
        import chug.config.manager
        import chug.config.models
        import chug.core
        import chug.core.progress
        import chug.utils

        for module in (
            chug.app,
            chug.config,
            chug.config.loader,
            chug.config.manager,
            chug.config.models,
            chug.core,
            chug.core.progress,
            chug.utils,
        ):
            assert isinstance(module, ModuleType)

    def test_public_api(self) -> None:
        """Test the names re-exported at the top level."""
        import chug

        assert set(chug.__all__) == {
            "Chug",
            "EtaReport",
            "EtaStatus",
            "ProgressEstimator",
            "TimestampWindow",
            "format_duration",
            "format_eta",
        }
        for name in chug.__all__:
            assert hasattr(chug, name)
