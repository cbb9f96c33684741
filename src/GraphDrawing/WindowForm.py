#!/usr/bin/env python
import logging

from matplotlib.figure import Figure
from PyQt5 import QtGui, QtWidgets
from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg as FigureCanvas

import GraphDrawing.QTAux as QTAux
import GraphDrawing.yaml_functions as yaml

logger = logging.getLogger(__name__)


def run_winform(form_file_path, provider, ext='yaml'):
    """
    Given the file path of the program that handle the form logic, loads and exec the corresponding WinForm
    :param form_file_path: most common value is __file__
    :param provider:       subclass of HostModel
    :param ext:            extension of the WinForm definition
    :return: the window
    """
    win_config_name = yaml.get_file_name_with_other_extension(form_file_path, ext)
    return ConfigurableWindow(win_config_name, provider)


class ConfigurableWindow(QtWidgets.QMainWindow):
    """
    Defines a WinForm with a toolbar and figures inside in a declarative manner in a config file
    Notes:
        - a config_file_name is a yaml that has the definition (see view_graph.yaml)
        - widgets go in the toolbar, figures fill the window
    """

    def __init__(self, config_file_name, provider):
        """
        Init
        :param config_file_name: name of the file containing the window definition
        :param provider: handles all the form logic, usually a subclass of HostModel
        """
        super(ConfigurableWindow, self).__init__(parent=None)

        self.widgets   = []
        self.fig_views = []
        self.provider  = provider
        self.provider.set_main_window(self)

        self.win_config = get_win_config(config_file_name)

        self.statusbar = create_status_bar(self.win_config, self)

        toolbar, toolbar_widgets = create_toolbar(self.win_config, self.provider)
        if toolbar is not None:
            self.widgets.extend(toolbar_widgets)
            self.addToolBar(toolbar)

        # Define the geometry of the main window
        size = self.win_config.get('size', [100, 100, 900, 600])
        QTAux.set_window(self, get_title(self.win_config, self.provider), size,
                         min_size=self.win_config.get('min_size', None))

        # Create FRAME
        self.FRAME = QtWidgets.QFrame(self)
        if 'back_color' in self.win_config:
            [c1, c2, c3, c4] = self.win_config['back_color']
            self.FRAME.setStyleSheet("QWidget { background-color: %s }" % QtGui.QColor(c1, c2, c3, c4).name())
        self.LAYOUT    = QtWidgets.QGridLayout()
        self.fig_views = set_layout(self.LAYOUT, self.win_config.get('layout', []), self)
        self.FRAME.setLayout(self.LAYOUT)
        self.setCentralWidget(self.FRAME)

        self.provider.initialize()
        self.refresh()
        self.show()

    def refresh(self):
        [figure.update_figure() for figure in self.fig_views]

    def refresh_widgets(self):
        for widget in self.widgets:
            widget.refresh()

    def show_status_bar_msg(self, msg):
        if self.statusbar is None:
            logger.warning('No status bar defined, message "%s" not shown', msg)
            return
        self.statusbar.showMessage(msg)

    def closeEvent(self, event):
        self.provider.close()
        for fig_view in self.fig_views:
            fig_view.figure.clear()
        super(ConfigurableWindow, self).closeEvent(event)


class FigureView(FigureCanvas):
    """
    Display a drawing that responds to a change in widget values or in its size
    """
    name_key = 'name'

    def __init__(self, parent, config):
        self.form   = parent
        self.name   = config.get(self.name_key, 'no_name')
        self.figure = Figure(figsize=None)  # not necessary to set figsize, the layout gives the size
        self.axes   = self.figure.add_subplot(111)

        FigureCanvas.__init__(self, self.figure)
        self.setParent(self.form)

        FigureCanvas.setSizePolicy(self, QtWidgets.QSizePolicy.Expanding, QtWidgets.QSizePolicy.Expanding)
        FigureCanvas.updateGeometry(self)

        self.figure.canvas.mpl_connect('resize_event', self.on_resize)

    def clear(self):
        # artists from the last paint are released here
        self.axes.clear()

    def update_figure(self):
        self.clear()
        self.form.provider.update_view(self, self.axes)
        self.draw()

    # Events
    def on_resize(self, _):
        self.update_figure()


class HostModel(object):
    """
    Host for ConfigurableWindow
       provides all the methods need it by ConfigurableWindow (like state management)
    """

    def __init__(self, initial_values=None):
        self._state      = initial_values if initial_values is not None else {}
        self.main_window = None

    def set_main_window(self, main_window):
        self.main_window = main_window

    def refresh(self):
        """
        Refresh the whole WinForm (widgets and figures)
        :return:
        """
        if self.main_window is None:
            return
        self.main_window.refresh_widgets()
        self.main_window.refresh()

    def set_value(self, name, value):
        """
        Set a new value for a state variable and redraw
        :param name:
        :param value:
        :return:
        """
        self._state[name] = value
        self.widget_changed(name, value)
        self.refresh()

    def set_value_if_not_present(self, name, value):
        if name not in self._state:
            self.set_value(name, value)

    def widget_changed(self, name, value):
        """
        Event triggered when any widget changes its value, useful to set the values of other widgets
        Abstract method
        :param name:
        :param value:
        :return:
        """
        pass

    def get_value(self, name, default=None):
        return self._state.get(name, default)

    def initialize(self):
        """
        Called when the WinForm is loaded, useful for initialization stuff
        Abstract method
        :return:
        """
        pass

    def close(self):
        """
        Called when the WinForm is closed, release here anything created for drawing
        Abstract method
        :return:
        """
        pass

    def title(self):
        """
        Returns the WinForm title
        :return: string or None (if None then the config title will be used)
        """
        return None

    def show_status_bar_msg(self, msg):
        if self.main_window is None:
            logger.debug('no main window defined yet, message "%s" not shown', msg)
            return
        self.main_window.show_status_bar_msg(msg)

    def update_view(self, figure, ax):
        """
        Update view of a given Figure
        Abstract method
        :param figure: :type FigureView
        :param ax:   axis of the Figure
        :return:
        """
        pass


# Layout definition
def get_win_config(config_file_name, window_key='window'):
    config1 = yaml.get_yaml_file(config_file_name)
    win_config = config1.get(window_key, {})
    if win_config == {}:
        raise KeyError('"%s" keyword not present in config file %s' % (window_key, config_file_name))
    return win_config


def get_title(win_config, provider, key='title'):
    title = provider.title()
    if title is None:
        title = win_config.get(key, 'Title')
    return title


def set_layout(father_layout, layout_config, window):
    fig_views = []
    if father_layout is None or not layout_config:
        return fig_views
    for item in layout_config:
        item_config = item['item']
        item_type   = item_config['type']
        if item_type == 'figure':
            fig_view = FigureView(window, item_config)
            father_layout.addWidget(fig_view)
            fig_views.append(fig_view)
        else:
            raise ValueError('Layout type "%s" not implemented' % item_type)
    return fig_views


def create_toolbar(config, provider, key='toolbar', tooltip_key='tooltip', check_key='Check', radio_key='Radio',
                   type_key='type'):
    widgets = []
    if key not in config:
        return None, widgets

    toolbar        = QtWidgets.QToolBar()
    toolbar_config = config[key]
    for i, item1 in enumerate(toolbar_config):
        item      = item1['item']
        title     = item.get('title', '')
        name      = item.get('name', 'Item_%s' % i)
        item_type = item.get(type_key, check_key)
        tooltip   = item.get(tooltip_key, None)
        if 'value' in item:
            provider.set_value_if_not_present(name, item['value'])

        if item.get('is_separator', False):
            toolbar.addSeparator()
        elif item_type == check_key:
            widgets.append(QTAux.CheckButton(name, title, provider, toolbar, tooltip=tooltip))
        elif item_type == radio_key:
            widgets.append(QTAux.RadioGroup(name, provider, toolbar, item.get('values', []), tooltip=tooltip))
        else:
            raise ValueError('%s is not implemented in Toolbar' % item_type)

    return toolbar, widgets


def create_status_bar(win_config, main_window, status_key='status_bar'):
    if not win_config.get(status_key, True):  # create a statusbar unless is explicitly forbidden
        return None
    statusbar = QtWidgets.QStatusBar(main_window)
    main_window.setStatusBar(statusbar)
    return statusbar
