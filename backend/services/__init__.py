"""Services module - Business logic layer"""

from .comparison_service import ComparisonService, compare_json
from .config_manager import ConfigManager
from .delta_engine import DeltaEngine
from .delta_flattener import DeltaFlattener
from .diff_export import DiffExporter
from .diff_generator import DiffGenerator
from .navigation import DiffNavigator

__all__ = [
    "ComparisonService",
    "compare_json",
    "ConfigManager",
    "DeltaEngine",
    "DeltaFlattener",
    "DiffExporter",
    "DiffGenerator",
    "DiffNavigator",
]
