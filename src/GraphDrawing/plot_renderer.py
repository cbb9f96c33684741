#!/usr/bin/env python
import logging
from enum import IntEnum

import matplotlib.lines as mlines
import matplotlib.patches as mpatches

import GraphDrawing.points_box as pb

logger = logging.getLogger(__name__)


class DrawMode(IntEnum):
    Line    = 0
    Scatter = 1


class PlotStyle:
    """
    Colors, widths and fonts used to draw the graph, created once and reused in every paint
    """
    defaults = {
        'title':          'y = cos^3(t^2) / (1.5t + 2)',
        'border_color':   'gray',
        'border_width':   1.0,
        'line_color':     'royalblue',
        'line_width':     2.0,
        'point_color':    'crimson',
        'line_radius':    2.5,   # point radius when drawing lines
        'scatter_radius': 4.0,   # point radius when drawing only points
        'text_color':     'black',
        'font_family':    'sans-serif',
        'font_size':      8,
        'title_color':    'darkslategray',
        'title_size':     12,
        'title_offset':   25,
        'label_offset':   [3, -15],
        'label_decimals': [1, 3],
    }

    def __init__(self, **values):
        unknown = set(values) - set(self.defaults)
        if unknown:
            raise ValueError('Unknown style values: %s' % ', '.join(sorted(unknown)))
        for k, v in self.defaults.items():
            setattr(self, k, values.get(k, v))

    @classmethod
    def from_config(cls, config):
        return cls(**(config or {}))

    def point_radius(self, draw_mode):
        return self.scatter_radius if draw_mode == DrawMode.Scatter else self.line_radius

    def label(self, point):
        t_decimals, y_decimals = self.label_decimals
        return '(%.*f; %.*f)' % (t_decimals, point[0], y_decimals, point[1])


class Painter(object):
    """
    Abstract drawing context, all coordinates are in pixels with y growing downwards
    """

    def draw_rectangle(self, area, color, width=1.0, dashed=False):
        # abstract method
        pass

    def draw_polyline(self, points, color, width=1.0):
        # abstract method
        pass

    def fill_ellipse(self, x, y, radius, color):
        # abstract method
        pass

    def draw_text(self, x, y, text, color, size, family='sans-serif', bold=False):
        # abstract method
        pass


class AxesPainter(Painter):
    """
    Painter over a matplotlib Axes: the axes fills the whole figure and its data coordinates are the
    figure pixels, so (0, 0) is the top left corner
    """

    def __init__(self, ax):
        self.ax = ax

    def begin(self):
        """
        Prepares the axes for a paint pass
        :return: width, height of the canvas in logical pixels
        """
        # bbox is in device pixels, on HiDPI screens there are ratio device pixels per logical one
        ratio = getattr(self.ax.figure.canvas, 'device_pixel_ratio', 1) or 1
        bbox  = self.ax.figure.bbox
        width, height = bbox.width / ratio, bbox.height / ratio
        self.ax.set_position([0.0, 0.0, 1.0, 1.0])
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_axis_off()
        return width, height

    def draw_rectangle(self, area, color, width=1.0, dashed=False):
        rectangle = mpatches.Rectangle((area.left, area.top), area.width, area.height, fill=False,
                                       edgecolor=color, linewidth=width, linestyle='--' if dashed else '-')
        self.ax.add_patch(rectangle)

    def draw_polyline(self, points, color, width=1.0):
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        self.ax.add_line(mlines.Line2D(xs, ys, color=color, linewidth=width))

    def fill_ellipse(self, x, y, radius, color):
        self.ax.add_patch(mpatches.Circle((x, y), radius, facecolor=color, edgecolor='none', zorder=3))

    def draw_text(self, x, y, text, color, size, family='sans-serif', bold=False):
        self.ax.text(x, y, text, color=color, fontsize=size, family=family,
                     fontweight='bold' if bold else 'normal',
                     horizontalalignment='left', verticalalignment='top', zorder=4)


class PlotRenderer:
    """
    Draws a list of points (as lines or as points) inside a rectangle of a Painter
    """

    def __init__(self, style=None):
        self.style       = style if style is not None else PlotStyle()
        self.show_labels = True
        self.draw_mode   = DrawMode.Line

    def draw(self, painter, area, points):
        """
        Draws border, graph, points, labels and title
        :param painter: :type Painter
        :param area:    :type DrawArea, where to draw the graph
        :param points:  :type list of [t, y], in graph coordinates
        :return: number of points drawn
        """
        if not area.is_valid():
            logger.debug('Nothing drawn, area %s is too small', area)
            return 0

        style = self.style
        painter.draw_rectangle(area, style.border_color, width=style.border_width, dashed=True)

        screen_points = pb.map_to_area(points, area)

        if self.draw_mode == DrawMode.Line and len(screen_points) >= 2:
            painter.draw_polyline(screen_points, style.line_color, width=style.line_width)

        radius   = style.point_radius(self.draw_mode)
        [dx, dy] = style.label_offset
        for point, screen_point in zip(points, screen_points):
            x, y = screen_point
            painter.fill_ellipse(x, y, radius, style.point_color)
            if self.show_labels:
                painter.draw_text(x + dx, y + dy, style.label(point), style.text_color, style.font_size,
                                  family=style.font_family)

        painter.draw_text(area.left, area.top - style.title_offset, style.title, style.title_color,
                          style.title_size, family=style.font_family, bold=True)
        logger.debug('%d points drawn as %s in %s', len(screen_points), DrawMode(self.draw_mode).name, area)
        return len(screen_points)
