import pytest

from isbn_barcode.barcodegen.document_builder import DEFAULT_FONT_NAME, VectorDocumentBuilder
from isbn_barcode.barcodegen.encoder import encode_ean5, encode_ean13
from isbn_barcode.barcodegen.layout import LayoutEngine
from isbn_barcode.eps import commands
from isbn_barcode.model.document import CMYK_BLACK, DocumentInfo, RenderDocument
from isbn_barcode.model.enums import Resolution, Symbology
from isbn_barcode.model.geometry import Geometry

IDENTIFIER = (9, 7, 8, 8, 9, 6, 9, 9, 3, 0, 4, 6, 0)
ADDON = (1, 3, 5, 9, 0)


def _geometry(
    with_addon: bool,
    offset_steps: int = 0,
    resolution: Resolution = Resolution.DPI_600,
    bar_height_mm: float = 15.0,
) -> Geometry:
    engine = LayoutEngine(resolution, bar_height_mm, offset_steps)
    if with_addon:
        return engine.layout(encode_ean13(IDENTIFIER), IDENTIFIER, encode_ean5(ADDON), ADDON)
    return engine.layout(encode_ean13(IDENTIFIER), IDENTIFIER)


def _info(addon: str = "") -> DocumentInfo:
    return DocumentInfo(
        identifier="9788969930460",
        addon=addon,
        bar_height_mm=15.0,
        module_width_mm=0.33,
        addon_offset_mm=0.0,
        creator="test",
    )


@pytest.fixture
def builder() -> VectorDocumentBuilder:
    return VectorDocumentBuilder()


class TestBuild:
    def test_main_only(self, builder: VectorDocumentBuilder) -> None:
        doc = builder.build(_geometry(False), _info())
        assert isinstance(doc, RenderDocument)
        assert len(doc.fills) == 43
        assert len(doc.texts) == 13
        assert doc.font_name == DEFAULT_FONT_NAME
        assert doc.font_size_mm == pytest.approx(3.175)
        assert doc.color == CMYK_BLACK
        assert doc.label_text() == "9788969930460"

    def test_fill_order_main_then_addon(self, builder: VectorDocumentBuilder) -> None:
        doc = builder.build(_geometry(True), _info("13590"))
        symbologies = [op.symbology for op in doc.fills]
        assert symbologies == [Symbology.EAN13] * 43 + [Symbology.EAN5] * 26
        main_x = [op.x0 for op in doc.fills_for(Symbology.EAN13)]
        addon_x = [op.x0 for op in doc.fills_for(Symbology.EAN5)]
        assert main_x == sorted(main_x)
        assert addon_x == sorted(addon_x)

    def test_texts_left_to_right(self, builder: VectorDocumentBuilder) -> None:
        doc = builder.build(_geometry(True), _info("13590"))
        xs = [op.anchor.x for op in doc.texts]
        assert xs == sorted(xs)
        assert doc.label_text() == "978896993046013590"
        assert doc.label_text(Symbology.EAN5) == "13590"

    def test_rectangle_corners(self, builder: VectorDocumentBuilder) -> None:
        doc = builder.build(_geometry(False), _info())
        first = doc.fills[0]
        # bottom-left, top-left, top-right, bottom-right
        assert [(p.x, p.y) for p in first.corners] == [(86, 26), (86, 380), (94, 380), (94, 26)]

    def test_scale_factors(self, builder: VectorDocumentBuilder) -> None:
        doc = builder.build(_geometry(False), _info())
        assert doc.units_per_mm == pytest.approx(600 / 25.4)
        assert doc.points_per_mm == pytest.approx(commands.MM_TO_PT)


class TestBoundingBox:
    def test_main_only(self, builder: VectorDocumentBuilder) -> None:
        bbox = builder.bounding_box(_geometry(False))
        assert (bbox.min_x, bbox.min_y) == (0, 0)
        assert bbox.width == 826 + 55
        assert bbox.height == 380 + 12

    def test_with_addon(self, builder: VectorDocumentBuilder) -> None:
        bbox = builder.bounding_box(_geometry(True))
        assert bbox.width == 1247 + 102
        assert bbox.height == 392

    def test_raised_addon_grows_height(self, builder: VectorDocumentBuilder) -> None:
        # label glyph top: 305 + 24 + 75
        bbox = builder.bounding_box(_geometry(True, offset_steps=10))
        assert bbox.height == 404 + 12

    @pytest.mark.parametrize("resolution", list(Resolution))
    @pytest.mark.parametrize("bar_height_mm", [5.0, 15.0, 30.0, 50.0])
    @pytest.mark.parametrize(
        "with_addon,expected_mm",
        [(False, 3.63 + 95 * 0.33 + 2.31), (True, 3.63 + (95 + 7 + 47) * 0.33 + 4.31)],
    )
    def test_width_matches_module_arithmetic(
        self,
        builder: VectorDocumentBuilder,
        resolution: Resolution,
        bar_height_mm: float,
        with_addon: bool,
        expected_mm: float,
    ) -> None:
        geometry = _geometry(with_addon, resolution=resolution, bar_height_mm=bar_height_mm)
        expected = resolution.to_units(expected_mm)
        assert abs(builder.bounding_box(geometry).width - expected) <= 1

    def test_large_font_labels_do_not_widen(self, builder: VectorDocumentBuilder) -> None:
        geometry = _geometry(True, resolution=Resolution.DPI_1200, bar_height_mm=50.0)
        right_bar = max(r.x1 for r in geometry.all_bars())
        bbox = builder.bounding_box(geometry)
        assert bbox.max_x == right_bar + Resolution.DPI_1200.to_units(4.31)


@pytest.mark.parametrize("font_name", ["", "Arial MT", "Font(1)", "/ArialMT", "a%b"])
def test_invalid_font_name(font_name: str) -> None:
    with pytest.raises(ValueError, match="font name"):
        VectorDocumentBuilder(font_name)


def test_custom_font_name() -> None:
    doc = VectorDocumentBuilder("Helvetica").build(_geometry(False), _info())
    assert doc.font_name == "Helvetica"
