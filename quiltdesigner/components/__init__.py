# Widgets (main, editor_view, items) are imported from their modules so the
# model stays importable without QtWidgets.

from .model import QuiltModel
