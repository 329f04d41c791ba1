from PySide6 import QtCore, QtGui
from typing import Any

def is_dark_mode() -> bool:
    hints = QtGui.QGuiApplication.styleHints()
    return hints.colorScheme() == QtCore.Qt.ColorScheme.Dark

def darklight_switch(lightmode_object: Any, darkmode_object: Any):
    '''
    Pick between two objects based on the current color scheme.
    '''
    if is_dark_mode():
        return darkmode_object

    return lightmode_object

def darklight_from_lightcolor(r, g, b, a = 255):
    '''
    Color for light mode, inverted for dark mode. Used for chrome drawn around
    the quilt (labels, canvas background); quilt colors are never inverted.
    '''
    light_color = QtGui.QColor(r, g, b, a)
    dark_color = QtGui.QColor(255 - r, 255 - g, 255 - b, a)

    return darklight_switch(light_color, dark_color)

def outline_for(color: QtGui.QColor, darken: int = 60) -> QtGui.QColor:
    '''
    Darker shade of a fill color, for outlining the triangle under the pointer.
    '''
    return QtGui.QColor.fromHsv(color.hue(), color.saturation(), max(0, color.value() - darken))
