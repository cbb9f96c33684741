#!/usr/bin/env python
from collections import namedtuple

import numpy as np

min_range = 1e-9

ScreenPoint = namedtuple('ScreenPoint', ['x', 'y'])


class DrawArea(namedtuple('DrawArea', ['left', 'top', 'width', 'height'])):
    """
    Rectangle (in pixels) where the graph is drawn, y grows downwards as in any screen
    """
    __slots__ = ()

    @property
    def right(self):
        return self.left + self.width

    @property
    def bottom(self):
        return self.top + self.height

    def is_valid(self):
        return self.width > 0 and self.height > 0

    @classmethod
    def inside(cls, width, height, padding):
        """
        Returns the area left inside a canvas of (width, height) after removing padding on every side
        Note: for small canvas width or height can be negative, check is_valid() before drawing
        """
        return cls(padding, padding, width - 2 * padding, height - 2 * padding)


class PointsBox:
    """
    Keeps an AABB that contains a set of points
       the box is creating adding points, but the points itself are not stored, just the min and max values
       of each coordinate
       AABB: Axis Aligned Bounding Box
    """

    def __init__(self, points=()):
        self.is_empty = True
        self.min_x = 0.0
        self.max_x = 0.0
        self.min_y = 0.0
        self.max_y = 0.0
        self.add_points(points)

    def size(self):
        return self.min_x, self.max_x, self.min_y, self.max_y

    def add_points(self, points):
        """
        Use the points to update the box size
        :param points: :type list of [x, y] (a SamplePoint is also fine)
        :return: nothing
        """
        for p in points:
            self.add_point(p)

    def add_point(self, p):
        [x, y] = p
        if self.is_empty:
            self.min_x, self.max_x, self.min_y, self.max_y = [x, x, y, y]
            self.is_empty = False
        else:
            self.min_x, self.max_x = update_bounds(x, self.min_x, self.max_x)
            self.min_y, self.max_y = update_bounds(y, self.min_y, self.max_y)

    def range_x(self):
        return safe_range(self.min_x, self.max_x) if not self.is_empty else 1.0

    def range_y(self):
        return safe_range(self.min_y, self.max_y) if not self.is_empty else 1.0


class ScreenMapper:
    """
    Linear transformation from graph coordinates (box) to screen coordinates (area)
        x: [min_x, max_x] -> [left, right]
        y: [min_y, max_y] -> [bottom, top]  (inverted, bigger values are drawn higher)
    """

    def __init__(self, box, area):
        self.box     = box
        self.area    = area
        self.scale_x = area.width / box.range_x()
        self.scale_y = area.height / box.range_y()

    def x(self, t):
        return self.area.left + (t - self.box.min_x) * self.scale_x

    def y(self, value):
        return self.area.bottom - (value - self.box.min_y) * self.scale_y

    def map_point(self, p):
        [t, value] = p
        return ScreenPoint(self.x(t), self.y(value))

    def map_points(self, points):
        """
        Maps all the points at once
        :param points: :type list of [x, y]
        :return: list of ScreenPoint, same order as points
        """
        if len(points) == 0:
            return []
        values = np.asarray(points, dtype=float)
        xs = self.x(values[:, 0])
        ys = self.y(values[:, 1])
        return [ScreenPoint(float(x), float(y)) for x, y in zip(xs, ys)]


def map_to_area(points, area):
    """
    Fits points inside area
    :param points: :type list of [x, y]
    :param area:   :type DrawArea
    :return: list of ScreenPoint
    """
    return ScreenMapper(PointsBox(points), area).map_points(points)


def safe_range(min_value, max_value):
    """
    Returns max - min, if it is (almost) zero returns 1.0 so it can be used as a divisor
    """
    delta = max_value - min_value
    return delta if abs(delta) >= min_range else 1.0


def update_bounds(x, min_x, max_x):
    new_min_x = x if x < min_x else min_x
    new_max_x = x if x > max_x else max_x
    return new_min_x, new_max_x
