import logging

from PySide6 import QtWidgets, QtGui, QtCore, QtPrintSupport

from ..components import QuiltModel
from ..components.main import Main
from ..config import QuiltConfig
from ..storage import DesignData, DesignStore
from .design_dialogs import LoadDesignDialog, ask_design_name

logger = logging.getLogger(__name__)

INSTRUCTIONS = """
<p>Here's how to use the tools:</p>
<ul>
<li><b>Drawing:</b> Click and drag with the pencil tool to color triangles</li>
<li><b>Fill:</b> Use the bucket tool to fill connected areas of the same color</li>
<li><b>Navigation:</b> Right-click or middle-click and drag to pan, use ctrl/cmd + scroll to zoom</li>
<li><b>History:</b> Use undo/redo to step through your changes</li>
<li><b>Color:</b> Click the color swatch to choose your active color</li>
<li><b>Size:</b> Adjust quilt and triangle sizes using the drop down menus</li>
</ul>
"""

class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, config: QuiltConfig):
        super().__init__()

        self.setWindowTitle("Quilt Pattern Designer")
        self.config = config

        settings = QtCore.QSettings(config.settings_organization, config.settings_application)
        self.store = DesignStore(settings, config.storage_key)

        self.model = QuiltModel(config.quilt_size, config.triangle_height)
        self.main_widget = Main(self.model, config.paint_color)
        self.setCentralWidget(self.main_widget)

        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("File")
        save_action = QtGui.QAction("Save Design...", self)
        load_action = QtGui.QAction("Load Design...", self)
        print_action = QtGui.QAction("Print Pattern...", self)
        exit_action = QtGui.QAction("Exit", self)

        save_action.setShortcut("Ctrl+S")
        load_action.setShortcut("Ctrl+O")
        print_action.setShortcut("Ctrl+P")
        exit_action.setShortcut("Ctrl+Q")

        file_menu.addAction(save_action)
        file_menu.addAction(load_action)
        file_menu.addSeparator()
        file_menu.addAction(print_action)
        file_menu.addSeparator()
        file_menu.addAction(exit_action)

        # Edit menu shares the toolbar's actions so enabled state stays in sync
        edit_menu = menubar.addMenu("Edit")
        edit_menu.addAction(self.main_widget.undo_action)
        edit_menu.addAction(self.main_widget.redo_action)

        help_menu = menubar.addMenu("Help")
        help_action = QtGui.QAction("How to Use", self)
        help_menu.addAction(help_action)

        save_action.triggered.connect(self._on_save_action)
        load_action.triggered.connect(self._on_load_action)
        print_action.triggered.connect(self._on_print_action)
        exit_action.triggered.connect(self.close)
        help_action.triggered.connect(self.show_instructions)

    def show_instructions(self):
        QtWidgets.QMessageBox.information(self, "Welcome to the Quilt Designer!", INSTRUCTIONS)

    def _on_save_action(self):
        name = ask_design_name(self)
        if name is None:
            return
        data = DesignData.capture(self.model.pattern(), self.model.grid_params())
        self.store.save(name, data)
        self.statusBar().showMessage(f"Saved “{name}”", 3000)

    def _on_load_action(self):
        dialog = LoadDesignDialog(self.store, self)
        if dialog.exec() != QtWidgets.QDialog.Accepted or dialog.selected is None:
            return

        design = dialog.selected
        try:
            self.model.load_state(design.data.pattern(), design.data.grid_params())
        except (KeyError, ValueError) as e:
            logger.error("Could not load design %r: %s", design.name, e)
            QtWidgets.QMessageBox.critical(self, "Load Error", f"Failed to load design:\n{e}")
            return
        logger.info("Loaded design %r (id %d)", design.name, design.id)
        self.statusBar().showMessage(f"Loaded “{design.name}”", 3000)

    def _on_print_action(self):
        printer = QtPrintSupport.QPrinter(QtPrintSupport.QPrinter.HighResolution)
        dialog = QtPrintSupport.QPrintDialog(printer, self)
        if dialog.exec() != QtWidgets.QDialog.Accepted:
            return
        painter = QtGui.QPainter(printer)
        try:
            self.main_widget.render_quilt(painter)
        finally:
            painter.end()
