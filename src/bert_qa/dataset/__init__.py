from .loader import LoadDataSetClient
from .models import DataSet, DataSetDocument, LoadError, Passage

__all__ = [
    "DataSet",
    "DataSetDocument",
    "LoadDataSetClient",
    "LoadError",
    "Passage",
]
