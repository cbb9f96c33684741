#!/usr/bin/env python

import sys
from PyQt5 import QtWidgets


def def_app(style='Fusion'):
    app = QtWidgets.QApplication(sys.argv)
    qt_style = QtWidgets.QStyleFactory.create(style)
    if qt_style is not None:
        QtWidgets.QApplication.setStyle(qt_style)
    return app


def set_window(window, title, size, min_size=None):
    [new_x, new_y, width, height] = size
    window.setGeometry(new_x, new_y, width, height)
    window.setWindowTitle(title)
    if min_size is not None:
        [min_width, min_height] = min_size
        window.setMinimumSize(min_width, min_height)


class ScreenWidget(object):
    """
    Abstract class for any kind of screen widget like Checks and Radios
    """

    def __init__(self, name, bound, layout, tooltip=None):
        # bound is the object responsible to keep the value, must implement:
        #     get_value
        #     set_value
        self.name    = name
        self.bounded = bound

        widget = self.get_widget()
        if widget is not None and layout is not None:
            layout.addWidget(widget)
            if tooltip is not None:
                widget.setToolTip(tooltip)

        self.refresh()

    def current_value(self):
        return self.bounded.get_value(self.name)

    def changed(self):
        """
        Internal event triggered when user changes the widget on the form, does the following things:
            - updates the internal value, the bound object redraws the form
        :return:
        """
        self.bounded.set_value(self.name, self.value())

    def get_widget(self):
        # abstract method
        return None

    def value(self):
        # abstract method
        return 0

    def refresh(self):
        # abstract method
        pass


class CheckButton(ScreenWidget):
    def __init__(self, name, title, bound, layout, tooltip=None):

        # Widget must be created before calling super
        self.button = QtWidgets.QCheckBox(title)
        super(CheckButton, self).__init__(name, bound, layout, tooltip=tooltip)
        self.button.stateChanged.connect(self.changed)

    def value(self):
        return self.button.isChecked()

    def get_widget(self):
        return self.button

    def refresh(self):
        self.button.setChecked(bool(self.current_value()))


class RadioGroup(ScreenWidget):
    """
    A set of mutually exclusive options, the value is the index of the checked one
    """
    def __init__(self, name, bound, layout, options, tooltip=None):

        # Widget must be created before calling super
        self.box     = QtWidgets.QWidget()
        self.group   = QtWidgets.QButtonGroup(self.box)
        box_layout   = QtWidgets.QHBoxLayout(self.box)
        box_layout.setContentsMargins(0, 0, 0, 0)
        self.buttons = []
        for i, option in enumerate(options):
            button = QtWidgets.QRadioButton(option)
            self.group.addButton(button, i)
            box_layout.addWidget(button)
            self.buttons.append(button)

        super(RadioGroup, self).__init__(name, bound, layout, tooltip=tooltip)
        self.group.buttonToggled.connect(self.toggled)

    def toggled(self, _, checked):
        # fired twice on every change (unchecked and checked), only the checked one matters
        if checked:
            self.changed()

    def value(self):
        return self.group.checkedId()

    def get_widget(self):
        return self.box

    def refresh(self):
        index = self.current_value()
        if index is not None and 0 <= int(index) < len(self.buttons):
            self.buttons[int(index)].setChecked(True)
