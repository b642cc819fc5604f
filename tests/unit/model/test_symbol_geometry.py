import pytest

from isbn_barcode.model.document import BoundingBox, FillOp
from isbn_barcode.model.enums import ModuleRole, Resolution, Symbology
from isbn_barcode.model.geometry import Geometry, Rect, TextAnchor
from isbn_barcode.model.symbol import ModulePattern, ModuleRun


class TestModulePattern:
    @pytest.fixture
    def pattern(self) -> ModulePattern:
        return ModulePattern(
            Symbology.EAN5,
            (
                ModuleRun(True, 1, ModuleRole.GUARD),
                ModuleRun(False, 1, ModuleRole.GUARD),
                ModuleRun(True, 2, ModuleRole.GUARD),
                ModuleRun(False, 3, ModuleRole.DIGIT, digit_index=0),
            ),
        )

    def test_counts(self, pattern: ModulePattern) -> None:
        assert pattern.module_count == 7
        assert pattern.dark_module_count == 3
        assert pattern.bar_count == 2

    def test_bitstring(self, pattern: ModulePattern) -> None:
        assert pattern.to_bitstring() == "1011000"

    def test_modules_expand_runs(self, pattern: ModulePattern) -> None:
        modules = pattern.modules()
        assert len(modules) == 7
        assert modules[2] == (True, ModuleRole.GUARD)
        assert modules[-1] == (False, ModuleRole.DIGIT)

    def test_zero_width_run_rejected(self) -> None:
        with pytest.raises(ValueError, match=">= 1"):
            ModuleRun(True, 0, ModuleRole.DIGIT)


def test_rect_shift() -> None:
    rect = Rect(10, 20, 18, 300, Symbology.EAN5, ModuleRole.DIGIT)
    moved = rect.shifted(19)
    assert (moved.x0, moved.y0, moved.x1, moved.y1) == (10, 39, 18, 319)
    assert moved.width == rect.width == 8
    assert moved.height == rect.height == 280


def test_geometry_iterators() -> None:
    main = Rect(0, 0, 8, 10, Symbology.EAN13, ModuleRole.GUARD)
    addon = Rect(100, 0, 108, 8, Symbology.EAN5, ModuleRole.GUARD)
    geometry = Geometry(
        resolution=Resolution.DPI_600,
        bars=(main,),
        addon_bars=(addon,),
        labels=(TextAnchor(0, 0, "9", Symbology.EAN13),),
        addon_labels=(TextAnchor(100, 9, "1", Symbology.EAN5),),
        font_size_mm=3.175,
        bar_height_mm=15.0,
    )
    assert geometry.has_addon
    assert list(geometry.all_bars()) == [main, addon]
    assert [a.text for a in geometry.all_labels()] == ["9", "1"]


def test_fill_rectangle_extent() -> None:
    op = FillOp.rectangle(86, 26, 94, 380, Symbology.EAN13)
    assert (op.x0, op.y0, op.x1, op.y1) == (86, 26, 94, 380)
    assert op.corners[1].y == 380


def test_bounding_box_size() -> None:
    bbox = BoundingBox(0, 0, 881, 392)
    assert (bbox.width, bbox.height) == (881, 392)
