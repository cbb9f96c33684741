#!/usr/bin/env python

import logging
import sys

import GraphDrawing.graph_aux as ga
import GraphDrawing.logging_config as lc
import GraphDrawing.plot_renderer as rd
import GraphDrawing.points_box as pb
import GraphDrawing.QTAux as QTAux
import GraphDrawing.WindowForm as WinForm
import GraphDrawing.yaml_functions as yaml

logger = logging.getLogger(__name__)


class GraphHost(WinForm.HostModel):
    """
    Shows y = cos^3(t^2) / (1.5t + 2) as a line graph or as a scatter of points
    """

    def __init__(self, plot_config=None):
        # keys (names used in the yaml definition file)
        self.labels_key = 'show_labels'
        self.mode_key   = 'draw_mode'

        config = plot_config if plot_config is not None else {}

        # particular data
        [start, end, step] = config.get('domain', [2.3, 7.2, 0.8])
        self.padding  = config.get('padding', 40)
        self.points   = ga.cubic_cos_samples(start, end, step)
        self.renderer = rd.PlotRenderer(rd.PlotStyle.from_config(config.get('style', {})))

        # initial widget values come from the "value" keys of view_graph.yaml
        super(GraphHost, self).__init__()

    def initialize(self):
        self.show_status_bar_msg('%d points, t from %.1f to %.1f' %
                                 (len(self.points), self.points[0].t, self.points[-1].t))

    def update_view(self, figure, ax):
        """
        Update the figure
        Notes:
            - This method is called when the figure is resized or any widget changes
            - All form variables are in dict self._state
        :param figure:
        :param ax:
        :return:
        """
        painter       = rd.AxesPainter(ax)
        width, height = painter.begin()
        area          = pb.DrawArea.inside(width, height, self.padding)
        self.renderer.show_labels = bool(self.get_value(self.labels_key, True))
        self.renderer.draw_mode   = rd.DrawMode(self.get_value(self.mode_key, rd.DrawMode.Line))
        return self.renderer.draw(painter, area, self.points)

    def close(self):
        logger.info('Graph window closed')


def get_plot_config(form_file_path, key='plot'):
    """
    Returns the plot section of the WinForm definition of form_file_path
    """
    config_name = yaml.get_file_name_with_other_extension(form_file_path)
    return yaml.get_yaml_file(config_name).get(key, {})


def main():
    lc.setup_logging()
    app      = QTAux.def_app()
    provider = GraphHost(get_plot_config(__file__))  # class to handle the WinForm logic
    window   = WinForm.run_winform(__file__, provider)
    logger.info('Showing %s', window.windowTitle())
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
