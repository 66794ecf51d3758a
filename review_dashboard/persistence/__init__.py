from .stores import KeyValueStore, MemoryStore, JsonFileStore
from .status_overlay import StatusOverlay, effective_status, create_overlay
from .csv_export import CSVExporter

__all__ = ['KeyValueStore', 'MemoryStore', 'JsonFileStore', 'StatusOverlay',
           'effective_status', 'create_overlay', 'CSVExporter']
