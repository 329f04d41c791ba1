from .triangle import TriangleItem
from .column_labels import ColumnLabels
