import matplotlib.lines as mlines
import matplotlib.patches as mpatches
import pytest
from matplotlib.figure import Figure

import GraphDrawing.graph_aux as ga
import GraphDrawing.plot_renderer as rd
import GraphDrawing.points_box as pb


class RecordingPainter(rd.Painter):
    def __init__(self):
        self.calls = []

    def draw_rectangle(self, area, color, width=1.0, dashed=False):
        self.calls.append(('rectangle', area))

    def draw_polyline(self, points, color, width=1.0):
        self.calls.append(('polyline', list(points)))

    def fill_ellipse(self, x, y, radius, color):
        self.calls.append(('ellipse', (x, y, radius)))

    def draw_text(self, x, y, text, color, size, family='sans-serif', bold=False):
        self.calls.append(('text', text))

    def count(self, kind):
        return len([c for c in self.calls if c[0] == kind])


area   = pb.DrawArea(40, 40, 820, 520)
points = ga.cubic_cos_samples()


def draw(renderer, draw_area=area, samples=points):
    painter = RecordingPainter()
    renderer.draw(painter, draw_area, samples)
    return painter


def test_line_mode():
    painter = draw(rd.PlotRenderer())
    assert painter.calls[0] == ('rectangle', area)
    assert painter.count('polyline') == 1
    assert painter.count('ellipse') == len(points)
    assert len(painter.calls[1][1]) == len(points)


def test_scatter_mode_has_no_line():
    renderer = rd.PlotRenderer()
    renderer.draw_mode = rd.DrawMode.Scatter
    painter = draw(renderer)
    assert painter.count('polyline') == 0
    assert painter.count('ellipse') == len(points)


def test_point_radius_depends_on_mode():
    style    = rd.PlotStyle()
    renderer = rd.PlotRenderer(style)
    line_radius = draw(renderer).calls[2][1][2]
    renderer.draw_mode = rd.DrawMode.Scatter
    scatter_radius = draw(renderer).calls[1][1][2]
    assert line_radius == style.line_radius
    assert scatter_radius == style.scatter_radius


@pytest.mark.parametrize('draw_area', [
    pb.DrawArea(40, 40, 0, 520),
    pb.DrawArea(40, 40, 820, 0),
    pb.DrawArea(40, 40, -20, 520),
    pb.DrawArea(40, 40, 820, -5),
])
def test_degenerate_area_draws_nothing(draw_area):
    renderer = rd.PlotRenderer()
    painter  = RecordingPainter()
    assert renderer.draw(painter, draw_area, points) == 0
    assert painter.calls == []


def test_labels():
    renderer = rd.PlotRenderer()
    texts = [c[1] for c in draw(renderer).calls if c[0] == 'text']
    assert len(texts) == len(points) + 1
    assert texts[0] == '(2.3; %.3f)' % points[0].y
    assert texts[-1] == renderer.style.title

    renderer.show_labels = False
    texts = [c[1] for c in draw(renderer).calls if c[0] == 'text']
    assert texts == [renderer.style.title]


def test_less_than_two_points_skip_line():
    renderer = rd.PlotRenderer()
    painter  = draw(renderer, samples=points[:1])
    assert painter.count('polyline') == 0
    assert painter.count('ellipse') == 1

    painter = draw(renderer, samples=[])
    assert painter.count('polyline') == 0
    assert painter.count('ellipse') == 0
    assert painter.count('rectangle') == 1


def test_equal_values_are_drawn_inside_area():
    samples = [ga.SamplePoint(t, 0.25) for t in (1.0, 2.0, 3.0)]
    painter = draw(rd.PlotRenderer(), samples=samples)
    for kind, (x, y, _) in [c for c in painter.calls if c[0] == 'ellipse']:
        assert area.left <= x <= area.right
        assert y == pytest.approx(area.bottom)


def test_style_from_config():
    style = rd.PlotStyle.from_config({'line_color': 'green', 'label_decimals': [2, 2]})
    assert style.line_color == 'green'
    assert style.point_color == rd.PlotStyle.defaults['point_color']
    assert style.label((1.0, 0.5)) == '(1.00; 0.50)'
    assert rd.PlotStyle.from_config(None).title == rd.PlotStyle.defaults['title']


def test_style_rejects_unknown_values():
    with pytest.raises(ValueError):
        rd.PlotStyle(colour='red')


def test_axes_painter():
    figure = Figure(figsize=(9, 6), dpi=100)
    ax     = figure.add_subplot(111)
    painter = rd.AxesPainter(ax)
    assert painter.begin() == pytest.approx((900, 600))
    assert ax.get_ylim() == pytest.approx((600, 0))

    rd.PlotRenderer().draw(painter, pb.DrawArea.inside(900, 600, 40), points)
    circles    = [p for p in ax.patches if isinstance(p, mpatches.Circle)]
    rectangles = [p for p in ax.patches if isinstance(p, mpatches.Rectangle)]
    assert len(circles) == len(points)
    assert len(rectangles) == 1
    assert len([line for line in ax.lines if isinstance(line, mlines.Line2D)]) == 1
    assert len(ax.texts) == len(points) + 1


def test_axes_painter_uses_logical_pixels():
    figure = Figure(figsize=(9, 6), dpi=100)
    figure.canvas._set_device_pixel_ratio(2)  # as Qt does on a HiDPI screen
    ax = figure.add_subplot(111)
    assert figure.bbox.width == pytest.approx(1800)
    assert rd.AxesPainter(ax).begin() == pytest.approx((900, 600))
    assert ax.get_xlim() == pytest.approx((0, 900))
