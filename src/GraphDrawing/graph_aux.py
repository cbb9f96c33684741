#!/usr/bin/env python
import logging
import math
from collections import namedtuple

logger = logging.getLogger(__name__)

# one sample of the graph: t is the domain value, y the function value at t
SamplePoint = namedtuple('SamplePoint', ['t', 'y'])

min_denominator = 1e-9


def cubic_cos_ratio(t):
    """
    y = cos^3(t^2) / (1.5t + 2)
    :param t: domain value
    :return: function value at t
    """
    numerator   = math.cos(t * t) ** 3
    denominator = 1.5 * t + 2.0
    if abs(denominator) < min_denominator:
        # only at t = -4/3, never inside the default domain
        denominator = min_denominator
    return numerator / denominator


def sample_function(function, start, end, step):
    """
    Evaluates function at start, start + step, start + 2*step, ... while the value is not greater than end
    :param function: f(t) -> y
    :param start:    first domain value
    :param end:      last domain value allowed
    :param step:     distance between two consecutive domain values, must be positive
    :return: list of SamplePoint in domain order
    """
    check_domain(start, end, step)
    limit  = end + abs(step) * 1e-9  # so 0.1*3 still counts as 0.3
    points = []
    i      = 0
    t      = start
    while t <= limit:
        points.append(SamplePoint(t, function(t)))
        i += 1
        t  = start + i * step
    logger.info('%s sampled %d times in [%s, %s] step %s', getattr(function, '__name__', function), len(points),
                start, end, step)
    return points


def cubic_cos_samples(start=2.3, end=7.2, step=0.8):
    return sample_function(cubic_cos_ratio, start, end, step)


def check_domain(start, end, step):
    for name, value in [['start', start], ['end', end], ['step', step]]:
        if not math.isfinite(value):
            raise ValueError('%s must be a finite number, got %s' % (name, value))
    if step <= 0:
        raise ValueError('step must be positive, got %s' % step)
    if start > end:
        raise ValueError('start (%s) is greater than end (%s)' % (start, end))
