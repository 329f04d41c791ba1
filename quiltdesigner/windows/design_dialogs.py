from PySide6 import QtCore, QtWidgets

from ..storage import Design, DesignStore

class LoadDesignDialog(QtWidgets.QDialog):
    '''
    Lists saved designs, newest last. Load closes the dialog with the chosen
    design in ``selected``; Delete removes a design from the store in place.
    '''

    def __init__(self, store: DesignStore, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Load Design")
        self.setMinimumSize(360, 300)

        self.store = store
        self.selected: Design | None = None

        self.list_widget = QtWidgets.QListWidget()
        self.list_widget.itemDoubleClicked.connect(lambda _: self._on_load())
        self.empty_label = QtWidgets.QLabel("No saved designs")
        self.empty_label.setAlignment(QtCore.Qt.AlignCenter)

        load_button = QtWidgets.QPushButton("Load")
        delete_button = QtWidgets.QPushButton("Delete")
        close_button = QtWidgets.QPushButton("Close")
        load_button.clicked.connect(self._on_load)
        delete_button.clicked.connect(self._on_delete)
        close_button.clicked.connect(self.reject)

        buttons = QtWidgets.QHBoxLayout()
        buttons.addWidget(load_button)
        buttons.addWidget(delete_button)
        buttons.addStretch(1)
        buttons.addWidget(close_button)

        layout = QtWidgets.QVBoxLayout(self)
        layout.addWidget(self.empty_label)
        layout.addWidget(self.list_widget, 1)
        layout.addLayout(buttons)

        self._populate()

    def _populate(self):
        self.list_widget.clear()
        designs = self.store.designs()
        for design in designs:
            try:
                date = design.created.astimezone().strftime("%x")
            except ValueError:
                date = design.date
            item = QtWidgets.QListWidgetItem(f"{design.name}    {date}")
            item.setData(QtCore.Qt.UserRole, design.id)
            self.list_widget.addItem(item)

        self.empty_label.setVisible(not designs)
        self.list_widget.setVisible(bool(designs))

    def _current_id(self) -> int | None:
        item = self.list_widget.currentItem()
        return item.data(QtCore.Qt.UserRole) if item else None

    def _on_load(self):
        design_id = self._current_id()
        if design_id is None:
            return
        self.selected = self.store.get(design_id)
        self.accept()

    def _on_delete(self):
        design_id = self._current_id()
        if design_id is None:
            return
        self.store.delete(design_id)
        self._populate()


def ask_design_name(parent) -> str | None:
    name, ok = QtWidgets.QInputDialog.getText(parent, "Save Design", "Design Name",
                                              QtWidgets.QLineEdit.Normal, "")
    if not ok or not name.strip():
        return None
    return name.strip()
